from wugal.html_table import export_html, load_json
import argparse
import logging
'''
This module converts a JSON file saved from the WhatsUp Gold API into an HTML table.
'''


def main(argv=None):
    parser = argparse.ArgumentParser(description='Convert WhatsUp Gold JSON to an HTML table.')
    parser.add_argument('source', help='JSON file to read')
    parser.add_argument('destination', help='HTML file to write')
    parser.add_argument('--title', default='WhatsUp Gold Report')
    args = parser.parse_args(argv)
    records = load_json(args.source)
    export_html(records, args.destination, title=args.title)
    print(f'Wrote {len(records)} rows to {args.destination}')

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    main()
