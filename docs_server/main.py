import logging

from docs_server.app import STATIC_DIR, app
from docs_server.pages import setup_directories

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


def run():
  pages_dir = app.config['PAGES_DIR']
  port = app.config['PORT']

  # Create required directories and the default home page
  setup_directories(pages_dir, STATIC_DIR)

  logging.info(f"📚 Documentation server running at http://localhost:{port}")
  logging.info(f"📝 Add markdown files to '{pages_dir}' to create new documentation pages")

  app.run(host=app.config['HOST'], port=port, debug=app.config['DEBUG'])


if __name__ == '__main__':
  run()
