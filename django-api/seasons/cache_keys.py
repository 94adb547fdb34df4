"""Cache keys for season list responses."""


def season_list_key(host_id: str, year: int | None = None) -> str:
    if year is None:
        return f"seasons:{host_id}:all"
    return f"seasons:{host_id}:{year}"
