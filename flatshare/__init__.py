from flatshare.app import create_app
