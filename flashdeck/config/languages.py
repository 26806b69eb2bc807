"""Language-specific speech configurations."""

LANG_CONFIG = {
    "EN": {
        "label": "ENGLISH",
        "voice": "en-US-JennyNeural",
        "rate": "-10%",
        "pitch": "+0Hz",
    },
}
