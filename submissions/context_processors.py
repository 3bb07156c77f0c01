from django.conf import settings


def site_context(request):
    """Adds site-wide names to all templates."""
    return {
        'site_name': getattr(settings, 'SITE_NAME', 'ClassMate Idea Hub'),
    }
