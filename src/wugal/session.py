from datetime import datetime, timedelta, timezone
import wugal.exceptions


class WUGSession:
    '''
    Holds the credential used to stamp requests sent to one WhatsUp Gold server.

    Token sessions are filled from the server's /token response and expire after expires_in seconds. Basic sessions
    carry no token; the requests.Session sends the credential itself and the session never expires.
    '''

    def __init__(self, server_uri: str, basic: bool = False):
        self.server_uri = server_uri
        self.basic = basic
        self.token_type = None
        self.access_token = None
        self.refresh_token = None
        self.expiry = None

    def update(self, token_response: dict, now: datetime = None):
        '''
        Stores the access token, refresh token and expiry from a /token response.
        '''
        if not isinstance(token_response, dict) or not token_response.get('access_token'):
            raise wugal.exceptions.AuthenticationError(f'No access token returned by {self.server_uri}.')
        now = now or datetime.now(timezone.utc)
        self.token_type = token_response.get('token_type') or 'bearer'
        self.access_token = token_response['access_token']
        #Keep the previous refresh token if the server did not rotate it.
        self.refresh_token = token_response.get('refresh_token') or self.refresh_token
        expires_in = int(token_response.get('expires_in') or 0)
        #No expires_in means the server gave no lifetime; the token is used until it is rejected.
        self.expiry = now + timedelta(seconds=expires_in) if expires_in > 0 else None
        return self

    @property
    def is_authenticated(self) -> bool:
        return self.basic or self.access_token is not None

    def is_expired(self, now: datetime = None, skew: int = 0) -> bool:
        '''
        True when no token is held or the token expires within skew seconds. A token without a known expiry
        never counts as expired.
        '''
        if self.basic:
            return False
        if not self.access_token:
            return True
        if self.expiry is None:
            return False
        now = now or datetime.now(timezone.utc)
        return now + timedelta(seconds=skew) >= self.expiry

    def headers(self) -> dict:
        '''
        Authorization header for the held token.
        '''
        if self.basic:
            return {}
        if not self.access_token:
            raise wugal.exceptions.NotConnectedError(f'No session with {self.server_uri}. Call connect() first.')
        return {"Authorization": f'{self.token_type} {self.access_token}'}

    def clear(self):
        self.token_type = None
        self.access_token = None
        self.refresh_token = None
        self.expiry = None

    def __repr__(self):
        state = 'basic' if self.basic else ('expired' if self.is_expired() else 'active')
        return f'<WUGSession {self.server_uri} {state}>'
