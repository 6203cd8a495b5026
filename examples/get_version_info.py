from wugal.api import RequestsHandler
import getpass
import logging
'''
This module prints the WhatsUp Gold version and the REST API version of a server.
'''


def version_info(server: str, username: str, password: str):
    #Create RequestsHandler object
    wug = RequestsHandler(server=server,
                          user=username,
                          password=password,
                          verify=False)
    with wug:
        product = wug.get_product_version()
        api = wug.get_product_api()
        if isinstance(product, int):
            print(f'Failed to read the product version from {server}. Response: {product}')
            return product
        print(f"{server} is running WhatsUp Gold {product.get('version')}")
        if not isinstance(api, int):
            print(f"REST API version: {api.get('version')}")
    return 200

if __name__ == '__main__':
    #Implement global logger at the debug level.
    logging.basicConfig(filename='wugal_global.log', level=logging.DEBUG)
    logger = logging.getLogger("wugal")
    logger.setLevel(logging.DEBUG)
    #Gather user input for login and destination server.
    my_user = input('What is your username? ')
    my_pass = getpass.getpass('What is your password? ')
    server = input('What server would you like to check? ')
    version_info(server=server, username=my_user, password=my_pass)
