import os

# Keep telelog off the console while pytest captures output.
os.environ.setdefault("AKARI_EDITOR_DISABLE_CONSOLE", "1")
