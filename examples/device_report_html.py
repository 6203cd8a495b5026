from wugal.api import RequestsHandler
from wugal.html_table import export_html
from wugal.reports import DEVICE_REPORTS
import getpass
import logging
'''
This module pulls a report for every device in a group and writes it to an HTML table.
'''


def group_report(server: str, user: str, password: str, group: str, report: str, days: int, output: str):
    wug = RequestsHandler(server=server, user=user, password=password, verify=False)
    with wug:
        #Find the group by name. Searching returns partial matches as well.
        groups = wug.get_device_groups(search=group)
        if isinstance(groups, int):
            print(f'Failed to search device groups on {server}')
            return groups
        matches = [x for x in groups if x.get('name') == group]
        if not matches:
            print(f'No device group called {group} on {server}')
            return 404
        rows = wug.get_group_report(matches[0]['id'], report, range='lastNDays', range_n=days)
        if isinstance(rows, int):
            print(f'Failed to pull the {report} report for {group}')
            return rows
    export_html(rows, output, title=f'{report} report for {group}, last {days} days')
    print(f'Wrote {len(rows)} rows to {output}')
    return 200

if __name__ == '__main__':
    logging.basicConfig(filename='wugal_global.log', level=logging.DEBUG)
    user = input('What is the username? ')
    secret = getpass.getpass("What is the pass? ")
    server = input('What server would you like to query? (provide IP/DNS) ')
    group = input('What device group? ')
    report = input(f'Which report? ({", ".join(sorted(DEVICE_REPORTS))}) ')
    while report not in DEVICE_REPORTS:
        report = input('Report not understood. Please pick one of the listed reports. ')
    days = int(input('How many days? ') or '1')
    group_report(server=server, user=user, password=secret, group=group, report=report, days=days,
                 output=f'{report}.html')
