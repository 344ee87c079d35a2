def join_url(first: str, second: str) -> str:
    """Join two URL segments keeping exactly one ``/`` at the seam."""
    first_slash = first.endswith("/")
    second_slash = second.startswith("/")
    if not first_slash and not second_slash:
        return f"{first}/{second}"
    if first_slash and second_slash:
        return first[:-1] + second
    return first + second


def build_url(base_url: str, api_path: str, trailing_segment: str | None = None) -> str:
    url = join_url(base_url, api_path)
    if trailing_segment:
        url = join_url(url, trailing_segment)
    return url
