import os
import requests
import logging
from json import JSONDecodeError
from requests.adapters import HTTPAdapter
from requests.auth import HTTPBasicAuth
from urllib3.util.retry import Retry
import wugal.exceptions
from wugal.reports import build_report_params, format_utc, report_endpoint
from wugal.session import WUGSession

#Transient responses worth repeating. POST and PATCH are never retried.
RETRY_STATUS_CODES = (429, 502, 503, 504)
RETRY_METHODS = frozenset(['GET', 'PUT', 'DELETE', 'HEAD', 'OPTIONS'])
FORM_CONTENT = 'application/x-www-form-urlencoded'


class RequestsHandler:
    def __init__(self, server: str, user: str, password: str = None, port: int = 9644, protocol: str = 'https',
                 use_basic_auth: bool = False, proxy_use_environment_variables: bool = False, proxy: str = None,
                 proxy_secure: bool = True, content: str = "application/json", accept: str = "application/json",
                 verify=True, connection_timeout: int = 15, retries: int = 3, backoff_factor: float = 0.5,
                 refresh_skew: int = 60, logger: logging.Logger = None):
        '''
        Creates WhatsUp Gold object. Pass server, user, and password as strings. The REST API listens on port 9644
        by default.

        Specify use_basic_auth = True to send the credentials with every request instead of requesting a token.
        Tokens are refreshed automatically once they are within refresh_skew seconds of expiring.

        Specify proxy_use_environment_variables = True if you would prefer that the requests package default to
        using your OS's environment variables. Specify your HTTP proxy under 'proxy' or your HTTPS proxy under
        proxy_secure. Only one proxy type (insecure/secure) is supported at a time.

        The arguments: content, accept, verify, and connection_timeout are all requests parameters. retries and
        backoff_factor configure urllib3's Retry for GET, PUT and DELETE requests.
        '''
        self.server = server
        self.user = user
        self.password = password
        self.url = f'{protocol}://{self.server}:{port}/api/v1/'
        self.timeout = connection_timeout
        self.content = content
        self.refresh_skew = refresh_skew
        self.wug_session = WUGSession(self.url, basic=use_basic_auth)
        #Create and update Session object parameters
        self.session = requests.Session()
        self.session.headers.update({"accept": accept})
        if use_basic_auth:
            self.session.auth = HTTPBasicAuth(user, password)
        self.session.verify = verify
        retry = Retry(total=retries, backoff_factor=backoff_factor, status_forcelist=RETRY_STATUS_CODES,
                      allowed_methods=RETRY_METHODS, raise_on_status=False)
        adapter = HTTPAdapter(max_retries=retry)
        self.session.mount('https://', adapter)
        self.session.mount('http://', adapter)
        #Prepare proxy settings. Defaults to no proxy settings. Use requests environment variables if specified.
        if not proxy_use_environment_variables:
            if not proxy: self.proxy = {'https': '', 'http': ''}
            elif proxy_secure: self.proxy = {'https': proxy}
            else: self.proxy = {'http': proxy}
        else:
            self.proxy = requests.utils.getproxies()
        #Session proxies variable behaves differently than expected as mentioned in github.com/psf/requests/pull/6068
        self.session.proxies.update(self.proxy)
        #Use logger specified by user or create one based on module name (wugal.api).
        self._logger = logger or logging.getLogger(__name__)
        self.status_code = None

    @classmethod
    def from_environment(cls, **kwargs):
        '''
        Creates a handler from WUG_SERVER, WUG_USERNAME, WUG_PASSWORD, WUG_PORT, WUG_PROTOCOL and WUG_VERIFY.
        Keyword arguments override the environment.

        WUG_VERIFY of false/0/no disables certificate verification; any other value is used as a CA bundle path.
        '''
        settings = {
            'server': os.environ.get('WUG_SERVER'),
            'user': os.environ.get('WUG_USERNAME'),
            'password': os.environ.get('WUG_PASSWORD'),
        }
        if os.environ.get('WUG_PORT'):
            try:
                settings['port'] = int(os.environ['WUG_PORT'])
            except ValueError as e:
                raise wugal.exceptions.ConfigurationError(f'WUG_PORT must be a number.') from e
        if os.environ.get('WUG_PROTOCOL'):
            settings['protocol'] = os.environ['WUG_PROTOCOL']
        verify = os.environ.get('WUG_VERIFY')
        if verify:
            settings['verify'] = False if verify.lower() in ('false', '0', 'no') else verify
        settings.update(kwargs)
        if not settings['server'] or not settings['user']:
            raise wugal.exceptions.ConfigurationError('WUG_SERVER and WUG_USERNAME must be set.')
        return cls(**settings)

    def do(self, http_method: str, endpoint: str, ep_params: dict = None, json: dict = None, data: dict = None,
           headers: dict = None, authenticate: bool = True):
        '''
        Sends a request to the specified API endpoint.

        Returns the decoded JSON body for 2xx responses ({} when the body is empty) and the status code for
        everything else.
        '''
        request_headers = {"Content-Type": self.content}
        if authenticate:
            request_headers.update(self.authorization())
        request_headers.update(headers or {})
        self.full_url = self.url + endpoint
        #Prepare log info with URL and method.
        self.prepare_log = f'URL={self.full_url},METHOD={http_method}'
        try:
            self.r = self.session.request(method = http_method, url = self.full_url, params = ep_params,
                                          json = json, data = data, headers = request_headers,
                                          timeout = self.timeout, proxies = self.session.proxies)
        except requests.RequestException as e:
            self.failed_log = f'EXCEPTION,{self.prepare_log},EXCEPTION:{e}'
            self._logger.exception(msg=self.failed_log)
            raise wugal.exceptions.WUGALException(f'Error occurred during API request.') from e
        self.status_code = self.r.status_code
        #Handle good response. Try to transform data to JSON and raise WUGAL exception if JSON errors occur.
        if 200 <= self.r.status_code < 300:
            self.success_log = f'SUCCESS,{self.prepare_log},RESPONSE={self.r.status_code},MESSAGE={self.r.reason}'
            self._logger.debug(msg=self.success_log)
            if not self.r.content:
                return {}
            try:
                return self.r.json()
            except (ValueError, JSONDecodeError) as e:
                self.failed_log = f'EXCEPTION,{self.prepare_log},EXCEPTION:{e}'
                self._logger.exception(msg=self.failed_log)
                raise wugal.exceptions.JSONError(f'Error processing JSON in API response.') from e
        #Handle all non 2xx responses. Log at the warning level instead of intentionally crashing API handler.
        self.failed_log = f'FAILED,{self.prepare_log},RESPONSE={self.r.status_code},MESSAGE={self.r.reason}'
        #Allow connect/refresh functions to handle their own failed API calls.
        if endpoint != 'token':
            self._logger.warning(msg=self.failed_log)
        return self.r.status_code

    def get(self, endpoint: str, ep_params: dict = None, json: dict = None):
        '''
        Sends a GET request to the endpoint.
        '''
        return self.do(http_method = 'GET', endpoint = endpoint, ep_params = ep_params, json = json)

    def post(self, endpoint: str, ep_params: dict = None, json: dict = None, **kwargs):
        '''
        Sends a POST request to the endpoint.
        '''
        return self.do(http_method = 'POST', endpoint = endpoint, ep_params = ep_params, json = json, **kwargs)

    def put(self, endpoint: str, ep_params: dict = None, json: dict = None):
        '''
        Sends a PUT request to the endpoint.
        '''
        return self.do(http_method = 'PUT', endpoint = endpoint, ep_params = ep_params, json = json)

    def patch(self, endpoint: str, ep_params: dict = None, json: dict = None):
        '''
        Sends a PATCH request to the endpoint.
        '''
        return self.do(http_method = 'PATCH', endpoint = endpoint, ep_params = ep_params, json = json)

    def delete(self, endpoint: str, ep_params: dict = None, json: dict = None):
        '''
        Sends a DELETE request to the endpoint.
        '''
        return self.do(http_method = 'DELETE', endpoint = endpoint, ep_params = ep_params, json = json)

    def get_paged(self, endpoint: str, key: str = None, ep_params: dict = None, limit: int = None):
        '''
        Follows paging.nextPageId and returns the items of every page as one list. Items are read from data, or
        from data[key] when the list is nested. Stops once limit items have been collected.

        Returns the status code if any page fails.
        '''
        params = dict(ep_params or {})
        items = []
        while True:
            page = self.get(endpoint, ep_params = dict(params))
            if isinstance(page, int):
                return page
            found = page.get('data', []) if isinstance(page, dict) else page
            if key:
                found = found.get(key, []) if isinstance(found, dict) else []
            if isinstance(found, list):
                items.extend(found)
            elif found:
                items.append(found)
            if limit and len(items) >= limit:
                return items[:limit]
            next_page = (page.get('paging') or {}).get('nextPageId') if isinstance(page, dict) else None
            if not next_page:
                return items
            params['pageId'] = next_page

    @staticmethod
    def unwrap(response, key: str = None):
        '''
        Returns response['data'] (or response['data'][key]). Status codes pass through untouched.
        '''
        if not isinstance(response, dict) or 'data' not in response:
            return response
        if key:
            return (response['data'] or {}).get(key)
        return response['data']

    def authorization(self) -> dict:
        '''
        Returns the header for the current token, refreshing it first if it is about to expire.
        '''
        if self.wug_session.basic:
            return {}
        if not self.wug_session.access_token:
            raise wugal.exceptions.NotConnectedError(f'Not connected to {self.server}. Call connect() first.')
        if self.wug_session.is_expired(skew = self.refresh_skew):
            self._logger.debug(msg=f'TOKEN,URL={self.url},MESSAGE=token expires {self.wug_session.expiry}, refreshing')
            self.refresh()
        return self.wug_session.headers()

    def connect(self):
        '''
        Requests an access token with the username and password. Don't use this function with basic auth.
        '''
        form = {"grant_type": "password", "username": self.user, "password": self.password}
        self.id = self.post(endpoint = 'token', data = form, headers = {"Content-Type": FORM_CONTENT},
                            authenticate = False)
        #Verify auth status.
        self.auth_failure(self.id)
        self.wug_session.update(self.id)
        self._logger.debug(msg=f'CONNECTED,URL={self.url},USER={self.user},EXPIRES={self.wug_session.expiry}')
        return self.id

    def refresh(self):
        '''
        Exchanges the refresh token for a new access token. Falls back to a full login when the refresh token is
        rejected and a password is known.
        '''
        if self.wug_session.refresh_token:
            form = {"grant_type": "refresh_token", "refresh_token": self.wug_session.refresh_token}
            self.id = self.post(endpoint = 'token', data = form, headers = {"Content-Type": FORM_CONTENT},
                                authenticate = False)
            if not isinstance(self.id, int):
                self.wug_session.update(self.id)
                return self.id
            self._logger.warning(msg=f'REFRESH {self.failed_log}')
        if self.password is None:
            raise wugal.exceptions.AuthenticationError(f'Token for {self.server} expired and cannot be renewed.')
        self.wug_session.clear()
        return self.connect()

    def auth_failure(self, status_code):
        '''
        Checks for 400/401/403 errors during the login process.
        '''
        if not isinstance(status_code, int):
            return
        if status_code in (400, 401):
            self._logger.critical(msg=f'AUTHENTICATION {self.failed_log}')
            raise wugal.exceptions.AuthenticationError(f'Failed to authenticate to server: {self.server}. Please check login info.')
        elif status_code == 403:
            self._logger.critical(msg=f'AUTHORIZATION {self.failed_log}')
            raise wugal.exceptions.AuthorizationError(f'Failed to login to server: {self.server} due to authorization issues.')
        self._logger.critical(msg=f'AUTHENTICATION {self.failed_log}')
        raise wugal.exceptions.AuthenticationError(f'Unexpected response {status_code} from {self.server} during login.')

    def disconnect(self):
        '''
        Forgets the access token. WhatsUp Gold has no endpoint to revoke it.
        '''
        self.wug_session.clear()

    def __enter__(self):
        #Don't request a token if using basic auth
        if self.wug_session.basic: return self
        self.connect()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.disconnect()

    def get_product_version(self):
        '''
        Gets product version
        '''
        self.response = self.unwrap(self.get('product/version'))
        return self.response

    def get_product_api(self):
        '''
        Gets product api
        '''
        self.response = self.unwrap(self.get('product/api'))
        return self.response

    def get_devices(self, search: str = None, view: str = 'overview', group_id: int = -1, limit: int = None):
        '''
        Gets every device in device group {group_id}, following pages. -1 is the root group (all devices).
        '''
        params = {'view': view}
        if search: params['search'] = search
        if limit: params['limit'] = limit
        self.response = self.get_paged(f'device-groups/{group_id}/devices/-', key = 'devices', ep_params = params,
                                       limit = limit)
        return self.response

    def get_device(self, device_id, view: str = 'overview'):
        '''
        Gets devices {device_id}
        '''
        self.response = self.unwrap(self.get(f'devices/{device_id}', ep_params = {'view': view}))
        return self.response

    def get_device_status(self, device_id):
        '''
        Gets devices {device_id} status
        '''
        self.response = self.unwrap(self.get(f'devices/{device_id}/status'))
        return self.response

    def get_device_properties(self, device_id):
        '''
        Gets devices {device_id} properties
        '''
        self.response = self.unwrap(self.get(f'devices/{device_id}/properties'))
        return self.response

    def put_device_properties(self, device_id, data: dict):
        '''
        Puts devices {device_id} properties
        '''
        self.response = self.unwrap(self.put(f'devices/{device_id}/properties', json = data))
        return self.response

    def delete_device(self, device_id, delete_discovered_devices: bool = False):
        '''
        Deletes devices {device_id}
        '''
        params = {'deleteDiscoveredDevices': str(delete_discovered_devices).lower()}
        self.response = self.unwrap(self.delete(f'devices/{device_id}', ep_params = params))
        return self.response

    def delete_devices(self, device_ids: list):
        '''
        Deletes several devices in one request.
        '''
        data = {"operation": "delete", "devices": list(device_ids)}
        self.response = self.unwrap(self.patch('devices/-/config', json = data))
        return self.response

    def put_device_refresh(self, device_id):
        '''
        Puts devices {device_id} refresh
        '''
        self.response = self.unwrap(self.put(f'devices/{device_id}/refresh'))
        return self.response

    def patch_devices_refresh(self, device_ids: list):
        '''
        Refreshes the attributes and monitors of several devices.
        '''
        self.response = self.unwrap(self.patch('devices/-/refresh', json = {"devices": list(device_ids)}))
        return self.response

    def put_device_poll_now(self, device_id):
        '''
        Puts devices {device_id} poll-now
        '''
        self.response = self.unwrap(self.put(f'devices/{device_id}/poll-now'))
        return self.response

    def get_device_template(self, device_id):
        '''
        Gets devices {device_id} config template
        '''
        self.response = self.unwrap(self.get(f'devices/{device_id}/config/template'))
        return self.response

    def patch_devices_config_template(self, templates: list, options=('all',)):
        '''
        Applies device templates. New devices are created for templates that don't match an existing device.
        '''
        data = {"options": list(options), "templates": list(templates)}
        self.response = self.unwrap(self.patch('devices/-/config/template', json = data))
        return self.response

    def add_device(self, display_name: str, ip_address: str, device_type: str = 'Network Device',
                   primary_role: str = 'Device', sub_roles: list = None, credentials: list = None,
                   active_monitors: list = ('Ping',), performance_monitors: list = None, attributes: dict = None,
                   note: str = None, groups: list = None, snmp_oid: str = None, options=('all',)):
        '''
        Builds a device template and applies it. Returns the new device id, or the API response when the server
        did not report one. Failed requests return the status code, so check status_code to tell it from an id.

        credentials are passed through as credential objects, e.g. {"credentialType": "snmpV2", "credential": "public"}.
        Monitors and groups are given by name; attributes as a name/value dict.
        '''
        template = {
            "templateId": display_name,
            "displayName": display_name,
            "deviceType": device_type,
            "primaryRole": primary_role,
            "subRoles": list(sub_roles or []),
            "snmpOid": snmp_oid or "",
            "note": note or "",
            "autoRefresh": True,
            "credentials": list(credentials or []),
            "interfaces": [{"defaultInterface": True, "pollUsingNetworkName": False,
                            "networkAddress": ip_address, "networkName": ip_address}],
            "attributes": [{"name": name, "value": str(value)} for name, value in (attributes or {}).items()],
            "activeMonitors": [{"classId": "", "Name": name} for name in active_monitors or []],
            "performanceMonitors": [{"classId": "", "Name": name} for name in performance_monitors or []],
            "passiveMonitors": [],
            "dependencies": [],
            "customLinks": [],
            "groups": [{"name": name} for name in groups or []],
        }
        result = self.patch_devices_config_template([template], options = options)
        self.response = result
        if isinstance(result, dict) and result.get('idMap'):
            self.response = result['idMap'][0].get('resultId', result)
        return self.response

    def get_device_attributes(self, device_id, names: list = None, names_contain: list = None):
        '''
        Gets devices {device_id} attributes, optionally limited to the given names or name fragments.
        '''
        params = {}
        if names: params['names'] = names
        if names_contain: params['namesContain'] = names_contain
        self.response = self.get_paged(f'devices/{device_id}/attributes/-', ep_params = params)
        return self.response

    def get_all_device_attributes(self, names: list = None):
        '''
        Gets attributes across every device.
        '''
        params = {'names': names} if names else {}
        self.response = self.get_paged('devices/-/attributes/-', ep_params = params)
        return self.response

    def post_device_attribute(self, device_id, name: str, value):
        '''
        Posts devices {device_id} attributes
        '''
        data = {"name": name, "value": str(value)}
        self.response = self.unwrap(self.post(f'devices/{device_id}/attributes/-', json = data))
        return self.response

    def put_device_attribute(self, device_id, attribute_id, name: str = None, value=None):
        '''
        Puts devices {device_id} attributes {attribute_id}
        '''
        params = {}
        if name is not None: params['name'] = name
        if value is not None: params['value'] = str(value)
        self.response = self.unwrap(self.put(f'devices/{device_id}/attributes/{attribute_id}', ep_params = params))
        return self.response

    def delete_device_attribute(self, device_id, attribute_id):
        '''
        Deletes devices {device_id} attributes {attribute_id}
        '''
        self.response = self.unwrap(self.delete(f'devices/{device_id}/attributes/{attribute_id}'))
        return self.response

    def delete_device_attributes(self, device_id, names: list):
        '''
        Deletes every attribute of devices {device_id} with one of the given names.
        '''
        self.response = self.unwrap(self.delete(f'devices/{device_id}/attributes/-', ep_params = {'names': names}))
        return self.response

    def set_device_attribute(self, device_id, name: str, value):
        '''
        Updates the attribute called name on devices {device_id}, creating it if it doesn't exist.
        '''
        existing = self.get_device_attributes(device_id, names = [name])
        if isinstance(existing, int):
            return existing
        for attribute in existing:
            if attribute.get('name') == name:
                return self.put_device_attribute(device_id, attribute['id'], value = value)
        return self.post_device_attribute(device_id, name, value)

    def get_device_groups(self, search: str = None, view: str = 'summary', limit: int = None):
        '''
        Gets every device group.
        '''
        params = {'view': view}
        if search: params['search'] = search
        if limit: params['limit'] = limit
        self.response = self.get_paged('device-groups/-', key = 'groups', ep_params = params, limit = limit)
        return self.response

    def get_device_group(self, group_id):
        '''
        Gets device-groups {group_id}
        '''
        self.response = self.unwrap(self.get(f'device-groups/{group_id}'))
        return self.response

    def get_device_group_members(self, group_id, view: str = 'id', search: str = None, limit: int = None):
        '''
        Gets the devices in device-groups {group_id}
        '''
        params = {'view': view}
        if search: params['search'] = search
        if limit: params['limit'] = limit
        self.response = self.get_paged(f'device-groups/{group_id}/devices/-', key = 'devices', ep_params = params,
                                       limit = limit)
        return self.response

    def post_device_group(self, parent_id, name: str, description: str = None):
        '''
        Creates a child group under device-groups {parent_id}
        '''
        data = {"name": name}
        if description: data['description'] = description
        self.response = self.unwrap(self.post(f'device-groups/{parent_id}/children', json = data))
        return self.response

    def put_device_group(self, group_id, data: dict):
        '''
        Puts device-groups {group_id}
        '''
        self.response = self.unwrap(self.put(f'device-groups/{group_id}', json = data))
        return self.response

    def delete_device_group(self, group_id):
        '''
        Deletes device-groups {group_id}
        '''
        self.response = self.unwrap(self.delete(f'device-groups/{group_id}'))
        return self.response

    def patch_device_group_members(self, group_id, device_ids: list, operation: str = 'add'):
        '''
        Adds devices to or removes devices from device-groups {group_id}. operation is 'add' or 'remove'.
        '''
        if operation not in ('add', 'remove'):
            raise ValueError(f'operation must be "add" or "remove", not {operation!r}')
        data = {"operation": operation, "devices": list(device_ids)}
        self.response = self.unwrap(self.patch(f'device-groups/{group_id}/devices', json = data))
        return self.response

    @staticmethod
    def _maintenance(enabled: bool, end_utc, reason: str) -> dict:
        data = {"enabled": enabled}
        if end_utc is not None: data['endUtc'] = format_utc(end_utc)
        if reason: data['reason'] = reason
        return data

    def get_device_maintenance(self, device_id):
        '''
        Gets devices {device_id} config maintenance
        '''
        self.response = self.unwrap(self.get(f'devices/{device_id}/config/maintenance'))
        return self.response

    def put_device_maintenance(self, device_id, enabled: bool, end_utc=None, reason: str = None):
        '''
        Puts devices {device_id} in or out of maintenance. end_utc may be a datetime or an ISO-8601 string.
        '''
        data = self._maintenance(enabled, end_utc, reason)
        self.response = self.unwrap(self.put(f'devices/{device_id}/config/maintenance', json = data))
        return self.response

    def patch_devices_maintenance(self, device_ids: list, enabled: bool, end_utc=None, reason: str = None):
        '''
        Puts several devices in or out of maintenance in one request.
        '''
        data = self._maintenance(enabled, end_utc, reason)
        data['devices'] = list(device_ids)
        self.response = self.unwrap(self.patch('devices/-/config/maintenance', json = data))
        return self.response

    def get_device_maintenance_schedule(self, device_id):
        '''
        Gets devices {device_id} config maintenance schedule
        '''
        self.response = self.unwrap(self.get(f'devices/{device_id}/config/maintenance/schedule'))
        return self.response

    def post_device_maintenance_schedule(self, device_id, data: dict):
        '''
        Posts devices {device_id} config maintenance schedule
        '''
        self.response = self.unwrap(self.post(f'devices/{device_id}/config/maintenance/schedule', json = data))
        return self.response

    def delete_device_maintenance_schedule(self, device_id, data: dict = None):
        '''
        Deletes devices {device_id} config maintenance schedule
        '''
        self.response = self.unwrap(self.delete(f'devices/{device_id}/config/maintenance/schedule', json = data))
        return self.response

    def get_monitors(self, monitor_type: str = 'active', search: str = None):
        '''
        Gets the monitor library
        '''
        params = {'type': monitor_type}
        if search: params['search'] = search
        self.response = self.get_paged('monitors/-', key = f'{monitor_type}Monitors', ep_params = params)
        return self.response

    def get_device_monitors(self, device_id, monitor_type: str = 'active'):
        '''
        Gets devices {device_id} monitors
        '''
        self.response = self.get_paged(f'devices/{device_id}/monitors/-', ep_params = {'type': monitor_type})
        return self.response

    def post_device_monitor(self, device_id, data: dict):
        '''
        Posts devices {device_id} monitors
        '''
        self.response = self.unwrap(self.post(f'devices/{device_id}/monitors/-', json = data))
        return self.response

    def delete_device_monitor(self, device_id, assignment_id):
        '''
        Deletes devices {device_id} monitors {assignment_id}
        '''
        self.response = self.unwrap(self.delete(f'devices/{device_id}/monitors/{assignment_id}'))
        return self.response

    def get_credentials(self, view: str = 'summary'):
        '''
        Gets credentials
        '''
        self.response = self.get_paged('credentials/-', ep_params = {'view': view})
        return self.response

    def get_device_credentials(self, device_id):
        '''
        Gets devices {device_id} credentials
        '''
        self.response = self.unwrap(self.get(f'devices/{device_id}/credentials'))
        return self.response

    def put_device_credentials(self, device_id, data: dict):
        '''
        Puts devices {device_id} credentials
        '''
        self.response = self.unwrap(self.put(f'devices/{device_id}/credentials', json = data))
        return self.response

    def get_device_report(self, device_id, report: str, **params):
        '''
        Gets devices {device_id} reports {report}. Keyword arguments are those of wugal.reports.build_report_params.
        '''
        query = build_report_params(**params)
        self.response = self.get_paged(f'devices/{device_id}/reports/{report_endpoint(report)}', ep_params = query,
                                       limit = query.get('limit'))
        return self.response

    def get_group_report(self, group_id, report: str, **params):
        '''
        Gets device-groups {group_id} devices reports {report} for every device in the group.
        '''
        query = build_report_params(**params)
        self.response = self.get_paged(f'device-groups/{group_id}/devices/reports/{report_endpoint(report)}',
                                       ep_params = query, limit = query.get('limit'))
        return self.response
