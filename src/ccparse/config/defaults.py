"""
ccparse.config.defaults - Default configuration values.
"""

DEFAULT_CONFIG = {
    "output": {
        # "pascal" matches the Header/Type/... layout; "snake" uses header/type/...
        "field_case": "pascal",
        # 0 = compact single-line JSON
        "indent": 0,
    },
}
