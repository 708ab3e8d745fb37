"""
Custom template filters for job listings.
"""
from django import template

register = template.Library()

CURRENCY_SYMBOLS = {
    'USD': '$',
    'EUR': '€',
    'GBP': '£',
}

PERIOD_SUFFIXES = {
    'yearly': '/year',
    'monthly': '/month',
    'hourly': '/hour',
}


@register.filter(name='format_number')
def format_number(value):
    """Thousands separators for counts and salaries: 1234567 -> 1,234,567."""
    try:
        value = int(value)
        return f"{value:,}"
    except (ValueError, TypeError):
        return value


@register.filter(name='format_salary')
def format_salary(salary):
    """
    Render a SalaryRange as "$120,000 - $160,000/year".
    """
    if not salary:
        return ''
    symbol = CURRENCY_SYMBOLS.get(salary.currency, f"{salary.currency} ")
    suffix = PERIOD_SUFFIXES.get(salary.period, '/hour')
    return f"{symbol}{salary.min:,} - {symbol}{salary.max:,}{suffix}"


@register.filter(name='match_color')
def match_color(score):
    """Bootstrap contextual class for a match score."""
    try:
        score = int(score)
    except (ValueError, TypeError):
        return 'secondary'
    if score >= 80:
        return 'success'
    if score >= 60:
        return 'primary'
    if score >= 40:
        return 'warning'
    return 'danger'

