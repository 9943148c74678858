"""
Pages Routes - Public static pages
"""

from collections import namedtuple
from flask import render_template, url_for
from . import pages_bp


Page = namedtuple('Page', ['rule', 'endpoint', 'template', 'title'])

# Every static page on the site: URL rule, endpoint, template and <title>
PAGES = [
    Page('/', 'index', 'pages/index.html', 'Home'),
    Page('/about', 'about', 'pages/about.html', 'About Me'),
    Page('/skills', 'skills', 'pages/skills.html', 'Skills'),
    Page('/portfolio', 'portfolio', 'pages/portfolio.html', 'Portfolio'),
    Page('/events', 'events', 'pages/events.html', 'Events'),
    Page('/blog', 'blog', 'pages/blog.html', 'Blog'),
    Page('/interests', 'interests', 'pages/interests.html', 'Interests'),
    Page('/photos', 'photos', 'pages/photos.html', 'Photos'),
]

SITEMAP_PAGE = Page('/sitemap', 'sitemap', 'pages/sitemap.html', 'Site Map')


def _make_view(page):
    def view():
        return render_template(page.template, title=page.title)
    view.__name__ = page.endpoint
    view.__doc__ = f"{page.title} page"
    return view


for _page in PAGES:
    pages_bp.add_url_rule(_page.rule, _page.endpoint, _make_view(_page), methods=['GET'])


@pages_bp.route(SITEMAP_PAGE.rule)
def sitemap():
    """Site map listing every page"""
    entries = [
        {'url': url_for(f'pages.{page.endpoint}'), 'title': page.title}
        for page in PAGES
    ]
    entries.append({'url': url_for('contact.contact'), 'title': 'Contact'})
    return render_template(SITEMAP_PAGE.template, title=SITEMAP_PAGE.title, entries=entries)
