import os

# ==== selection defaults / env vars ====
SELECTION_TIMEOUT = float(os.getenv("INTERACTIVITY_SELECTION_TIMEOUT", 60))
DEFAULT_CANCEL_EMOJI = os.getenv("INTERACTIVITY_CANCEL_EMOJI", "❌")
DEFAULT_SELECTION_TITLE = os.getenv("INTERACTIVITY_SELECTION_TITLE", "Select one of these:")
