"""Empty marker types a harness can resolve and construct by name."""


class UWU:
    """Zero-field marker type."""


class OWO:
    """Zero-field marker type."""


class OVO:
    """Zero-field marker type."""


__all__ = ["OVO", "OWO", "UWU"]
