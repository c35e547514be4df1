import os

# Keep telelog quiet while the suite runs; set before locale_keys is imported.
os.environ.setdefault("LOCALE_KEYS_DISABLE_CONSOLE", "1")
