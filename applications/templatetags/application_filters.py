"""
Template filters for application status badges and timeline icons.
"""
from django import template

from applications.services import get_status_color, get_status_label, get_timeline_icon

register = template.Library()


@register.filter(name='status_label')
def status_label(value):
    return get_status_label(value)


@register.filter(name='status_color')
def status_color(value):
    """Bootstrap contextual class for a status, e.g. 'success' for offers."""
    return get_status_color(value)


@register.filter(name='timeline_icon')
def timeline_icon(value):
    return get_timeline_icon(value)
