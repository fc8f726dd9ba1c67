"""Agent-facing descriptions for the search tools."""

DOCS_SEARCH_DESCRIPTION = """Documentation Search - Relevance-ranked search across the official Clix documentation.

**Overview:**
Searches the Clix documentation index (llms.txt), ranks pages against the query and returns the
fetched page content with source links for SDK integration, configuration and troubleshooting.

**Use Cases:**
- SDK setup and initialization guides (iOS, Android, Flutter, React Native)
- Push notification and in-app message configuration
- API reference and integration patterns
- Troubleshooting SDK integration issues
- User segmentation and analytics setup

**Returns:**
- Fetched documentation content (not just links)
- Source URLs for further reference
- Results ordered by relevance score

**Parameters:**
- `query` (required): Natural language search query (2-200 characters)
- `maxResults` (optional): Number of results to return (1-10, default: 3)

**Example:**
```
search_docs({ query: "iOS push notification setup with APNs certificate", maxResults: 5 })
```"""

SDK_SEARCH_DESCRIPTION = """SDK Source Code Search - Search Clix SDK source code across iOS (Swift), Android (Kotlin), Flutter (Dart) and React Native (TypeScript).

**Overview:**
Ranks the files listed in each SDK's llms.txt index against the query and fetches the actual
implementation code for development, debugging and integration.

**Use Cases:**
- Find specific SDK methods and class implementations
- Locate platform-specific features and APIs
- Debug SDK integration issues with actual source code
- Compare implementations across platforms

**Returns:**
- Source code fetched from GitHub in fenced, language-tagged blocks
- File metadata (platform, source link, description)
- Results ordered by relevance score

**Parameters:**
- `query` (required): Code-focused search query (2-200 characters)
- `platform` (optional): `ios`, `android`, `flutter`, `react-native` or `all` (default)
- `maxResults` (optional): Number of results to return (1-10, default: 3)

**Example:**
```
search_sdk({ query: "notification service extension implementation", platform: "ios", maxResults: 3 })
```"""
