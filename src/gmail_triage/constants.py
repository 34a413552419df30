"""Constants for Gmail Triage."""

from pathlib import Path

# --- Config paths ---
CONFIG_DIR = Path.home() / ".gmail-triage"
CREDENTIALS_PATH = CONFIG_DIR / "credentials.json"
TOKEN_PATH = CONFIG_DIR / "token.json"

# --- Gmail API ---
SCOPES = ["https://www.googleapis.com/auth/gmail.modify"]
FETCH_BATCH_SIZE = 10  # unread messages fetched per session
UNREAD_QUERY = "is:unread"
UNREAD_LABEL = "UNREAD"

# --- Rendering ---
RENDER_WIDTH = 80  # columns for HTML -> text
NO_CONTENT_TEXT = "No readable content found in the email."

# --- Interaction ---
SCROLL_STEP = 10  # lines per PgUp/PgDn
DEFAULT_VISIBLE_HEIGHT = 20

# --- Status messages ---
STATUS_NO_SELECTION = "No email selected."
STATUS_MARKED_READ = "Email marked as read."
STATUS_MARK_READ_FAILED = "Error marking email as read: {error}"
STATUS_LINK_OPENED = "Unsubscribe link opened."
STATUS_UNSUBSCRIBE_FAILED = "Error unsubscribing: {error}"
STATUS_MAILTO = (
    "This email uses a mailto link for unsubscribing. Please send an email to {address}"
)
STATUS_UNSUPPORTED = "Unsupported unsubscribe method: {raw}"
STATUS_NO_UNSUBSCRIBE = "No unsubscribe link found for this email."

# --- Display ---
CONTROLS_HINT = "Q: Quit | R: Mark as Read | U: Unsubscribe | ↑↓: Navigate | PgUp/PgDn: Scroll"
NO_SUBJECT_TEXT = "(no subject)"
