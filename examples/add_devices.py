from wugal.api import RequestsHandler
import csv
import getpass
import logging
'''
This module adds the devices listed in a CSV file (columns: name, address, role) to WhatsUp Gold and places them in a
device group. Devices are monitored with Ping and use the SNMP credential given.
'''


def add_devices(server: str, user: str, password: str, path: str, group: str, credential: str) -> list:
    added = []
    with open(path, newline='') as f:
        rows = list(csv.DictReader(f))
    wug = RequestsHandler(server=server, user=user, password=password, verify=False)
    with wug:
        for x in rows:
            credentials = [{"credentialType": "snmpV2", "credential": credential}] if credential else []
            device_id = wug.add_device(display_name=x['name'], ip_address=x['address'],
                                       primary_role=x.get('role') or 'Device', credentials=credentials,
                                       groups=[group], attributes={'ImportedFrom': path})
            #Device ids are numbers too, so check the status code rather than the return type.
            if 200 <= wug.status_code < 300:
                added.append(device_id)
            else:
                print(f'Failed to add {x["name"]} ({x["address"]}) to {server}')
    print(f'Added {len(added)} of {len(rows)} devices to {group}')
    return added

if __name__ == '__main__':
    logging.basicConfig(filename='wugal_global.log', level=logging.DEBUG)
    user = input('What is the username? ')
    secret = getpass.getpass("What is the pass? ")
    server = input('What server would you like to update? (provide IP/DNS) ')
    path = input('Path to the CSV file? ')
    group = input('Which device group should the devices join? ')
    credential = input('SNMP credential name (press enter for none)? ')
    add_devices(server=server, user=user, password=secret, path=path, group=group, credential=credential)
