"""Built-in sources, categories and shared HTTP constants."""

from ..models import Source

BLOG_SOURCES = [
    Source(
        id="meta",
        name="Meta Engineering",
        url="https://engineering.fb.com/",
        logo="🔵",
        color="#0668E1",
    ),
    Source(
        id="uber",
        name="Uber Engineering",
        url="https://www.uber.com/en-US/blog/engineering/",
        logo="⚫",
        color="#000000",
    ),
    Source(
        id="cloudflare",
        name="Cloudflare Engineering",
        url="https://blog.cloudflare.com/",
        logo="🟠",
        color="#F6821F",
    ),
    Source(
        id="microsoft",
        name="Microsoft DevBlogs",
        url="https://devblogs.microsoft.com/engineering-at-microsoft/",
        logo="🟦",
        color="#0078D4",
    ),
]

CATEGORIES = [
    {"id": "all", "name": "All Topics", "icon": "📚"},
    {"id": "ml", "name": "Machine Learning", "icon": "🤖"},
    {"id": "engineering", "name": "Engineering", "icon": "⚙️"},
    {"id": "infrastructure", "name": "Infrastructure", "icon": "🏗️"},
    {"id": "data", "name": "Data", "icon": "📊"},
    {"id": "mobile", "name": "Mobile", "icon": "📱"},
    {"id": "web", "name": "Web", "icon": "🌐"},
]

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

BROWSER_HEADERS = {
    "User-Agent": DEFAULT_USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Upgrade-Insecure-Requests": "1",
}

# Extra navigation hints sent when crawling arbitrary custom blogs
CUSTOM_SOURCE_HEADERS = {
    **BROWSER_HEADERS,
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "none",
}

SKIP_PATTERNS = [
    "tag", "category", "author", "page", "search", "about", "contact",
    "privacy", "terms", "login", "signup", "register", "feed", "rss",
    "cdn-cgi", "static", "assets", "images", "css", "js", "archive",
    "followers", "following", "membership", "subscribe", "newsletter",
]

DEFAULT_CATEGORY = "engineering"

# Storage keys
BLOG_KEY_PREFIX = "blog:"
INDEX_KEY = "blogs:index"
JOB_STATUS_KEY = "job:status"
USER_SOURCES_PREFIX = "user_sources:"
