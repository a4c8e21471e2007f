# File: robots_forge/bots.py
"""robots_forge.bots: каталог известных ботов и логика выбора целевых ботов для правила."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from robots_forge.models import ALL_BOTS

# Боты, по которым раскрывается "All" при проверке URL.
KNOWN_BOTS: Tuple[str, ...] = (
    "Bingbot",
    "Googlebot",
    "Googlebot-Image",
    "Googlebot-Mobile",
    "Googlebot-News",
    "Googlebot-Video",
    "Mediapartners-Google",
    "AdsBot-Google",
    "YandexBot",
    "AhrefsBot",
    "SemrushBot",
)

# Полный каталог конструктора правил, сгруппированный по владельцу.
BOT_CATALOG: Dict[str, Tuple[str, ...]] = {
    "General": (ALL_BOTS,),
    "Google": (
        "Googlebot",
        "Googlebot-Image",
        "Googlebot-Mobile",
        "Googlebot-News",
        "Googlebot-Video",
        "Mediapartners-Google",
        "AdsBot-Google",
        "Google-Extended",
    ),
    "Microsoft/Bing": ("Bingbot", "MSNBot"),
    "Yahoo": ("Slurp", "Yahoo-MMCrawler", "Yahoo-Blogs"),
    "International": ("Baiduspider", "Yeti", "YandexBot"),
    "AI/LLM": ("GPTBot", "Claude-Web", "Cohere-crawler", "CCBot", "anthropic-ai"),
    "SEO & Specialty": (
        "Teoma",
        "AhrefsBot",
        "SemrushBot",
        "GigaBot",
        "Nutch",
        "ia_archiver",
        "MJ12bot",
        "DotBot",
    ),
}


def catalog_bots() -> List[str]:
    """Плоский список всех ботов каталога без повторов, в порядке групп."""
    return list(dict.fromkeys(bot for group in BOT_CATALOG.values() for bot in group))


def evaluation_bots(target_bot: str) -> List[str]:
    """Список ботов для проверки URL: для "All" это сам "All" и все KNOWN_BOTS."""
    if target_bot == ALL_BOTS:
        return [ALL_BOTS, *KNOWN_BOTS]
    return [target_bot]


def toggle_bot(selection: Sequence[str], bot: str) -> List[str]:
    """Переключает *bot* в выборе конструктора правил.

    "All" сбрасывает остальные боты; выбор конкретного бота убирает "All";
    повторный выбор снимает бота; пустой выбор возвращается к ["All"].
    """
    if bot == ALL_BOTS:
        return [ALL_BOTS]
    selected = [b for b in selection if b != ALL_BOTS]
    if bot in selected:
        selected.remove(bot)
    else:
        selected.append(bot)
    return selected or [ALL_BOTS]


__all__ = ["KNOWN_BOTS", "BOT_CATALOG", "catalog_bots", "evaluation_bots", "toggle_bot"]
