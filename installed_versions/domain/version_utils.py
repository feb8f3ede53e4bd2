VERSION_TAG_PREFIX = "v"


def strip_version_tag(pretty_version: str, prefix: str = VERSION_TAG_PREFIX) -> str:
    """
    Remove a single leading tag character from a display version.

    Only one occurrence is stripped: "vv1.0" becomes "v1.0".
    """
    if prefix and pretty_version.startswith(prefix):
        return pretty_version[len(prefix):]
    return pretty_version
