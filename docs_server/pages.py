import logging
import os
from collections import namedtuple
from enum import Enum

import markdown
from flask import render_template

PAGE_EXTENSION = '.md'
HOME_PAGE = 'index'

NOT_FOUND_HTML = ('<div class="error"><h2>Page Not Found</h2>'
                  '<p>The requested page could not be found.</p></div>')
ERROR_HTML = ('<div class="error"><h2>Error Loading Page</h2>'
              '<p>There was an error loading this page.</p></div>')
MISSING_ROUTE_HTML = ('<div class="error"><h1>404 - Page Not Found</h1>'
                      '<p>The requested page does not exist.</p></div>')

MD_EXTENSIONS = ['fenced_code', 'tables']

DEFAULT_INDEX = """# Welcome to Documentation

This is your main documentation page. Edit `pages/index.md` to customize this content.

## Getting Started

1. Add new markdown files to the `pages/` folder
2. Each `.md` file will automatically appear in the sidebar
3. Use the theme toggle button to switch between light and dark modes

## Features

- **Multipage Support**: Add any `.md` file to the pages folder
- **Automatic Sidebar**: Files are automatically added to navigation
- **Dark/Light Theme**: Toggle between themes with persistent settings
- **Responsive Design**: Works on desktop and mobile devices

Happy documenting! 📚
"""


class RenderStatus(Enum):
    RENDERED = 'rendered'
    NOT_FOUND = 'not_found'
    ERROR = 'error'


RenderedPage = namedtuple('RenderedPage', ['status', 'html'])


def page_path(pages_dir, page):
    return os.path.join(pages_dir, f"{page}{PAGE_EXTENSION}")


def get_pages(pages_dir):
    """List page identifiers in pages_dir, home page first.

    The rest keep whatever order the filesystem enumerates them in.
    """
    os.makedirs(pages_dir, exist_ok=True)

    files = [
        name[:-len(PAGE_EXTENSION)] for name in os.listdir(pages_dir)
        if name.endswith(PAGE_EXTENSION)
    ]

    pages = [page for page in files if page != HOME_PAGE]
    if HOME_PAGE in files:
        pages.insert(0, HOME_PAGE)
    return pages


def render_page(pages_dir, page):
    """Convert a page's markdown to HTML.

    Never raises: a missing file gives NOT_FOUND and any failure while
    reading or converting gives ERROR, each with a fixed HTML fragment.
    """
    file_path = page_path(pages_dir, page)

    if not os.path.exists(file_path):
        return RenderedPage(RenderStatus.NOT_FOUND, NOT_FOUND_HTML)

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            content = f.read()
        html_content = markdown.markdown(content, extensions=MD_EXTENSIONS)
    except Exception:
        logging.exception(f"Failed to render page {page!r} from {file_path}")
        return RenderedPage(RenderStatus.ERROR, ERROR_HTML)

    return RenderedPage(RenderStatus.RENDERED, html_content)


def display_name(page):
    if page == HOME_PAGE:
        return 'Home'
    return page[:1].upper() + page[1:].replace('-', ' ')


def page_title(page):
    if page == HOME_PAGE:
        return 'Documentation'
    return f"{page[:1].upper() + page[1:]} - Documentation"


def build_navigation(pages, active_page):
    return [{
        'name': display_name(page),
        'href': '/' if page == HOME_PAGE else f"/{page}",
        'active': page == active_page,
    } for page in pages]


def compose_page(pages, current_page, content, active_page=None):
    """Render the full HTML document for a page.

    active_page defaults to current_page; pass '' to mark no entry active.
    Needs an application context.
    """
    if active_page is None:
        active_page = current_page

    return render_template('page.html',
                           title=page_title(current_page),
                           navigation=build_navigation(pages, active_page),
                           content=content)


def setup_directories(pages_dir, static_dir):
    os.makedirs(pages_dir, exist_ok=True)
    os.makedirs(static_dir, exist_ok=True)

    index_path = page_path(pages_dir, HOME_PAGE)
    if not os.path.exists(index_path):
        with open(index_path, 'w', encoding='utf-8') as file:
            file.write(DEFAULT_INDEX)
        logging.info(f"Created default home page at {index_path}")
