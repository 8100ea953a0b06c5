from django.conf import settings

from .resources import SECTIONS, section_resources


def global_settings(request):
    """Sidebar navigation: every section with its registered resources."""
    return {
        'nav_sections': [
            {'key': key, 'label': label, 'resources': section_resources(key)}
            for key, label in SECTIONS.items()
        ],
        'page_size': settings.PAGE_SIZE,
    }
