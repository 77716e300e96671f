import sys
import os

# Imports below are relative to this directory
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from app import create_app

# Settings come from the environment (see config.Config)
app = create_app()

# Passenger and gunicorn both find the app as 'application' or 'app'
application = app
