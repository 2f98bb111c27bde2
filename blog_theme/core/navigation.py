def _normalize(path: str) -> str:
    if len(path) > 1 and path.endswith("/"):
        return path.rstrip("/") or "/"
    return path


def is_root(current_path: str, root_path: str) -> bool:
    """Whether the page being rendered is the site's landing page."""
    return _normalize(current_path) == _normalize(root_path)
