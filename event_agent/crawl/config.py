"""
Configuration settings for the page fetcher and content distiller
"""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class FetchConfig:
    """Configuration class for fetcher and distiller settings"""
    # Browser session
    headless: bool = True
    navigation_timeout_ms: int = 30_000
    settle_ms: int = 3_000
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )
    locale: str = "pt-BR"
    accept_language: str = "pt-BR,pt;q=0.9,en-US;q=0.8,en;q=0.7"
    viewport: Tuple[int, int] = (1920, 1080)
    launch_args: List[str] = field(default_factory=lambda: [
        '--no-sandbox',
        '--disable-setuid-sandbox',
        '--disable-dev-shm-usage',
        '--disable-blink-features=AutomationControlled',
        '--disable-extensions',
        '--disable-gpu',
        '--no-first-run',
    ])

    # Anti-bot / queue systems that redirect instead of serving the page
    anti_bot_domains: List[str] = field(default_factory=lambda: [
        'queue-it.net',
        'queue-it.com',
        'datadome.co',
        'imperva.com',
        'perimeterx.net',
        'kasada.io',
    ])
    blocked_statuses: Tuple[int, ...] = (403, 429)

    # Content filtering
    min_content_length: int = 50
    max_text_length: int = 15_000
    structured_data_marker: str = "Event"
    removable_tags: List[str] = field(default_factory=lambda: [
        'script', 'style', 'nav', 'footer', 'header',
        'iframe', 'noscript', 'svg', 'form',
    ])
    noise_markers: List[str] = field(default_factory=lambda: [
        'cookie', 'consent', 'banner', 'popup', 'modal',
        'sidebar', 'ads', 'advertisement',
    ])
