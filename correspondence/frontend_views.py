"""
Frontend views for the email template gallery and composer.
"""
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import Http404
from django.shortcuts import get_object_or_404, render

from applications.models import JobApplication
from .email_templates import CATEGORIES, CATEGORY_LABELS, CONTEXT_VARIABLES
from .services import EmailTemplateService


@login_required
def template_gallery(request):
    """Templates grouped by category, with writing tips."""
    category = request.GET.get('category', '')
    groups = [
        {
            'category': name,
            'label': CATEGORY_LABELS[name],
            'templates': EmailTemplateService.get_templates_by_category(name),
            'tips': EmailTemplateService.get_email_tips(name),
        }
        for name in CATEGORIES
        if not category or name == category
    ]
    return render(request, 'correspondence/gallery.html', {'groups': groups, 'category': category})


@login_required
def compose(request, template_id):
    """Fill a template, prefilled from an application when ?application= is given."""
    template = EmailTemplateService.get_template(template_id)
    if template is None:
        raise Http404("Template not found")

    application = None
    application_id = request.GET.get('application') or request.POST.get('application')
    if application_id:
        application = get_object_or_404(JobApplication, id=application_id, user=request.user)

    context = EmailTemplateService.context_for_application(request.user, application)
    email = None
    missing = []

    if request.method == 'POST':
        for name in CONTEXT_VARIABLES:
            value = (request.POST.get(name) or '').strip()
            if value:
                context[name] = value
        _, missing = EmailTemplateService.validate_context(template.id, context)
        if missing:
            messages.warning(request, f"Still missing: {', '.join(missing)}")
        email = EmailTemplateService.generate_email(template.id, context)

    fields = [
        {'name': name, 'label': name.replace('_', ' ').capitalize(), 'value': context.get(name, '')}
        for name in template.variables
    ]

    return render(request, 'correspondence/compose.html', {
        'template': template,
        'application': application,
        'fields': fields,
        'email': email,
        'missing': missing,
        'tips': EmailTemplateService.get_email_tips(template.category),
        'preview': EmailTemplateService.get_template_preview(template.id),
    })
