"""Uri helpers"""
from urllib import parse

__all__ = ["join", "sdk_archive_name"]


def join(*parts: str, quote: bool = False) -> str:
    """Join uri parts onto a base, one slash between each."""
    if not parts:
        return ""

    base = parts[0] if parts[0].endswith("/") else f"{parts[0]}/"
    rest = [part.strip("/") for part in parts[1:] if part.strip("/")]
    if quote:
        rest = [parse.quote_plus(part, safe="/") for part in rest]

    return parse.urljoin(base, "/".join(rest))


def sdk_archive_name(version: str, os_name: str, arch: str) -> str:
    """File name of a published Cloud SDK release archive."""
    ext = "zip" if os_name == "windows" else "tar.gz"
    return f"google-cloud-sdk-{version}-{os_name}-{arch}.{ext}"
