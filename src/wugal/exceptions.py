class WUGALException(Exception):
    '''
    Basic WUGAL Exception.
    '''

    pass


class AuthenticationError(WUGALException):
    '''
    Unable to obtain or refresh an access token from the WhatsUp Gold server.
    '''

    pass


class AuthorizationError(WUGALException):
    '''
    Credentials were accepted but the account may not use the API.
    '''

    pass


class JSONError(WUGALException):
    '''
    Encountered error processing JSON data.
    '''

    pass


class NotConnectedError(WUGALException):
    '''
    A request was attempted before a token was obtained.
    '''

    pass


class ConfigurationError(WUGALException):
    '''
    Connection settings are missing or invalid.
    '''

    pass
