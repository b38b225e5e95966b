import os
import sys

# Add src directory to Python path so the 'lawsuits' package can be found without an install
sys.path.append(os.path.join(os.getcwd(), 'src'))

# Run with: gunicorn -c gunicorn.conf.py "lawsuits.api.server:create_app()"
bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Dataset is immutable after load; threads share it.
workers = int(os.environ.get('GUNICORN_WORKERS', '2'))
threads = int(os.environ.get('GUNICORN_THREADS', '4'))
worker_class = "gthread"

# Load the dataset once in the master; a load failure aborts start-up.
preload_app = True
accesslog = "-"
errorlog = "-"
loglevel = "info"
timeout = 30
