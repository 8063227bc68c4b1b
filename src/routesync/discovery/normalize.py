"""Path normalization — file-tree directories to canonical URL paths.

    ""                          -> /
    "(marketing)/about"         -> /about
    "docs//setup/"              -> /docs/setup
    "(marketing)/about/(shop)/" -> /about

Pure and total: every input produces a path, worst case ``/``.
"""

import re

# A path segment wrapped in parentheses is a route group
_ROUTE_GROUP = re.compile(r"/\([^)]+\)")
_MULTI_SLASH = re.compile(r"/+")


def normalize_path(relative_dir: str) -> str:
    """Convert a directory path relative to the app root into a URL path.

    Steps, in order:
        1. Prefix with ``/`` (backslashes become forward slashes).
        2. Drop every route-group segment, e.g. ``/(marketing)``.
        3. Collapse repeated slashes.
        4. Strip a trailing slash unless the path is exactly ``/``.

    """
    path = "/" + relative_dir.replace("\\", "/")
    path = _ROUTE_GROUP.sub("", path)
    path = _MULTI_SLASH.sub("/", path)
    if not path:
        return "/"
    if path != "/" and path.endswith("/"):
        path = path[:-1]
    return path
