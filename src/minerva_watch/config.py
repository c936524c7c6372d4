TARGET_URL = "https://www.falloutbuilds.com/fo76/minerva/"

# Tor client started by the workflow before the scraper runs.
PROXY_SERVER = "socks5://localhost:9050"
USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
REQUEST_TIMEOUT_SECONDS = 30

SCRAPE_RETRIES = 3
SCRAPE_RETRY_DELAY_SECONDS = 5
NOTIFY_RETRIES = 3
NOTIFY_RETRY_DELAY_SECONDS = 5
NOTIFY_TIMEOUT_SECONDS = 30

WEBHOOK_URL_ENV = "DISCORD_WEBHOOK_URL"

EMBED_TITLE = "Minerva's Current Status"
EMBED_COLOR = 3066993

# Discord rejects embeds above these limits.
EMBED_MAX_FIELDS = 25
EMBED_MAX_FIELD_VALUE = 1024
EMBED_MAX_DESCRIPTION = 4096
