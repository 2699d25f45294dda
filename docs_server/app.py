from flask import Flask
import logging
import os

from docs_server.pages import (HOME_PAGE, MISSING_ROUTE_HTML, compose_page,
                               get_pages, render_page)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Pages live in the working directory, templates and assets ship with the package
PAGES_DIR = os.environ.get('DOCS_PAGES_DIR', os.path.abspath('pages'))
STATIC_DIR = os.environ.get('DOCS_STATIC_DIR', os.path.join(BASE_DIR, 'static'))

app = Flask(__name__, static_folder=STATIC_DIR, static_url_path='/static')
app.config.update(
    PAGES_DIR=PAGES_DIR,
    HOST=os.environ.get('HOST', '0.0.0.0'),
    PORT=int(os.environ.get('PORT', 2062)),
    DEBUG=os.environ.get('DOCS_DEBUG', '').lower() in ('1', 'true', 'yes'),
)


@app.route('/')
def index():
    pages_dir = app.config['PAGES_DIR']
    pages = get_pages(pages_dir)
    rendered = render_page(pages_dir, HOME_PAGE)

    return compose_page(pages, HOME_PAGE, rendered.html)


@app.route('/<page>')
def view_page(page):
    pages_dir = app.config['PAGES_DIR']
    pages = get_pages(pages_dir)

    if page not in pages:
        logging.info(f"Page not found: {page}")
        return compose_page(pages, '404', MISSING_ROUTE_HTML, active_page=''), 404

    rendered = render_page(pages_dir, page)
    return compose_page(pages, page, rendered.html)
