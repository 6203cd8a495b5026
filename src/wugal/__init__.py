'''
WhatsUp Gold API Abstraction Layer.
'''
from wugal.api import RequestsHandler
from wugal.session import WUGSession

__version__ = '1.0.0'
