import os
import sys
import signal
import logging
from flask import Flask, render_template, request
from werkzeug.exceptions import HTTPException
from roommate_finder import RoommateFinder
from roster_handler import RosterHandler

# Set up logging
logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = os.environ.get("SESSION_SECRET", "dev-secret-key-change-in-production")

# Configuration
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
GPA_DATA_PATH = os.environ.get('GPA_DATA_PATH', os.path.join(BASE_DIR, 'GpaData.csv'))
ATTACHMENT_DATA_PATH = os.environ.get(
    'ATTACHMENT_DATA_PATH', os.path.join(BASE_DIR, 'AttachmentHUM_1071_-_08-2025.csv')
)
PORT = int(os.environ.get('PORT', 3000))

app.config['GPA_DATA_PATH'] = GPA_DATA_PATH
app.config['ATTACHMENT_DATA_PATH'] = ATTACHMENT_DATA_PATH

PLAIN_TEXT = {'Content-Type': 'text/plain; charset=utf-8'}

# Initialize handlers
roster_handler = RosterHandler()
roommate_finder = RoommateFinder(roster_handler)


@app.route('/')
def index():
    return render_template('index.html')


@app.route('/find-roommates', methods=['POST'])
def find_roommates():
    name = request.form.get('name')
    logger.debug(f"Roommate lookup for {name!r}")
    result = roommate_finder.find_roommates(
        name, app.config['GPA_DATA_PATH'], app.config['ATTACHMENT_DATA_PATH']
    )
    return result, 200, PLAIN_TEXT


@app.errorhandler(404)
def page_not_found(e):
    return 'Page not found', 404, PLAIN_TEXT


@app.errorhandler(Exception)
def handle_exception(e):
    # Let 405 and friends keep their own status
    if isinstance(e, HTTPException):
        return e
    logger.error(f"Unhandled error: {str(e)}", exc_info=True)
    return 'Something went wrong! Please try again later.', 500, PLAIN_TEXT


def verify_data_files():
    """
    Exit the process when either roster file is not accessible.
    """
    missing = roster_handler.verify_files(
        [app.config['GPA_DATA_PATH'], app.config['ATTACHMENT_DATA_PATH']]
    )
    if missing:
        logger.error(f"Error accessing roster files: {', '.join(missing)}")
        sys.exit(1)
    logger.info('Roster files verified successfully')


def handle_sigterm(signum, frame):
    logger.info('SIGTERM received. Shutting down gracefully')
    sys.exit(0)


if __name__ == '__main__':
    verify_data_files()
    signal.signal(signal.SIGTERM, handle_sigterm)
    logger.info(f"Server running on port {PORT}")
    app.run(host='0.0.0.0', port=PORT, debug=os.environ.get('FLASK_DEBUG') == '1')
