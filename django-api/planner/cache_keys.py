"""Cache keys shared by the views and the invalidation signals."""


def venue_config_key(venue_code: str) -> str:
    return f"venues:{venue_code}:config"
