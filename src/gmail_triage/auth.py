"""Authentication helpers for Gmail API."""

from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build, Resource

from gmail_triage.constants import CONFIG_DIR, CREDENTIALS_PATH, SCOPES, TOKEN_PATH
from gmail_triage.display import console
from gmail_triage.errors import StartupError


def get_gmail_service() -> Resource:
    """Return an authenticated Gmail API service object.

    Loads the cached token from TOKEN_PATH if available and refreshes it when
    expired.  If no usable token exists, an OAuth browser flow is launched
    (requires credentials.json at CREDENTIALS_PATH).

    Raises FileNotFoundError when credentials.json is missing and
    StartupError when Google rejects the credentials.
    """
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    creds: Credentials | None = None

    try:
        if TOKEN_PATH.exists():
            creds = Credentials.from_authorized_user_file(str(TOKEN_PATH), SCOPES)

        if creds and creds.expired and creds.refresh_token:
            creds.refresh(Request())
        elif not creds or not creds.valid:
            if not CREDENTIALS_PATH.exists():
                raise FileNotFoundError(
                    f"Credentials file not found at {CREDENTIALS_PATH}.\n"
                    "Download your OAuth client credentials from the Google Cloud Console "
                    "and save them as:\n"
                    f"  {CREDENTIALS_PATH}"
                )
            flow = InstalledAppFlow.from_client_secrets_file(str(CREDENTIALS_PATH), SCOPES)
            creds = flow.run_local_server(port=0)
    except GoogleAuthError as exc:
        raise StartupError(f"Gmail authentication failed: {exc}") from exc

    TOKEN_PATH.write_text(creds.to_json())

    return build("gmail", "v1", credentials=creds)


def check_auth() -> bool:
    """Test whether Gmail authentication is working.

    Returns True when the service can reach the Gmail API, False otherwise.
    Prints the authenticated address or the failure reason.
    """
    try:
        service = get_gmail_service()
        profile = service.users().getProfile(userId="me").execute()
    except Exception as exc:  # noqa: BLE001
        console.print(f"[red]Authentication failed:[/red] {exc}")
        return False

    console.print(
        f"Authenticated as [bold]{profile['emailAddress']}[/bold] "
        f"({profile.get('messagesTotal', 0)} messages)"
    )
    return True
