from wugal.api import RequestsHandler
from datetime import datetime, timedelta, timezone
import getpass
import logging
'''
This module puts every device matching a search in maintenance for a number of hours and records who did it in a
device attribute. Answer "y" to revert and take the devices back out of maintenance.
'''

ATTRIBUTE = 'MaintenanceOwner'


def maintenance(server: str, user: str, password: str, search: str, hours: int, revert: str):
    wug = RequestsHandler(server=server, user=user, password=password, verify=False)
    with wug:
        devices = wug.get_devices(search=search, view='basic')
        if isinstance(devices, int) or not devices:
            print(f'No devices matching {search} on {server}')
            return
        device_ids = [x['id'] for x in devices]
        if revert == 'y':
            if isinstance(wug.patch_devices_maintenance(device_ids, enabled=False), int):
                print(f'Failed to take devices out of maintenance on {server}')
            for x in device_ids:
                wug.delete_device_attributes(x, names=[ATTRIBUTE])
            return
        end = datetime.now(timezone.utc) + timedelta(hours=hours)
        result = wug.patch_devices_maintenance(device_ids, enabled=True, end_utc=end,
                                               reason=f'Scheduled by {user}')
        if isinstance(result, int):
            print(f'Failed to put devices in maintenance on {server}')
            return
        for x in devices:
            if isinstance(wug.set_device_attribute(x['id'], ATTRIBUTE, user), int):
                print(f'Failed to tag {x.get("name", x["id"])}')
        print(f'{len(device_ids)} devices in maintenance until {end:%Y-%m-%d %H:%M} UTC')

if __name__ == '__main__':
    logging.basicConfig(filename='wugal_global.log', level=logging.DEBUG)
    user = input('What is the username? ')
    secret = getpass.getpass("What is the pass? ")
    revert = input('Revert changes? (y/n) ').lower()
    while revert not in ('y', 'n'):
        revert = input('Input not understood. Please type "y" or "n". ').lower()
    server = input('What server would you like to update? (provide IP/DNS) ')
    search = input('Which devices? (name or address search) ')
    hours = 0 if revert == 'y' else int(input('How many hours? '))
    maintenance(server=server, user=user, password=secret, search=search, hours=hours, revert=revert)
