"""
Email Template Service
Renders the job-search email templates with a user's context.
"""
import json
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .email_templates import EMAIL_TEMPLATES, EMAIL_TIPS, SAMPLE_CONTEXT, SCENARIO_CATEGORIES, EmailTemplate

FALLBACK_PLACEHOLDER = re.compile(r"\{\{(\w+)\s*\|\|\s*'([^']+)'\}\}")
SIMPLE_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


@dataclass
class GeneratedEmail:
    subject: str
    body: str

    def to_dict(self) -> Dict[str, str]:
        return {'subject': self.subject, 'body': self.body}


class EmailTemplateService:
    """Lookup and rendering over the built-in templates."""

    @staticmethod
    def get_all_templates() -> List[EmailTemplate]:
        return list(EMAIL_TEMPLATES)

    @staticmethod
    def get_templates_by_category(category: str) -> List[EmailTemplate]:
        return [template for template in EMAIL_TEMPLATES if template.category == category]

    @staticmethod
    def get_template(template_id: str) -> Optional[EmailTemplate]:
        for template in EMAIL_TEMPLATES:
            if template.id == template_id:
                return template
        return None

    @staticmethod
    def replace_variables(text: str, context: Dict[str, str]) -> str:
        """
        Fill placeholders. Fallback forms are resolved first so that a
        fallback's own placeholders are filled by the second pass; a missing
        simple value renders as ``[name]``.
        """
        def fallback(match):
            return context.get(match.group(1)) or match.group(2)

        def simple(match):
            name = match.group(1)
            return context.get(name) or f"[{name}]"

        text = FALLBACK_PLACEHOLDER.sub(fallback, text)
        return SIMPLE_PLACEHOLDER.sub(simple, text)

    @staticmethod
    def generate_email(template_id: str, context: Dict[str, str]) -> Optional[GeneratedEmail]:
        """Render a template; None when the id is unknown."""
        template = EmailTemplateService.get_template(template_id)
        if template is None:
            return None
        return GeneratedEmail(
            subject=EmailTemplateService.replace_variables(template.subject, context),
            body=EmailTemplateService.replace_variables(template.body, context),
        )

    @staticmethod
    def get_suggested_templates(scenario: str) -> List[EmailTemplate]:
        category = SCENARIO_CATEGORIES.get(scenario)
        if category is None:
            return EmailTemplateService.get_all_templates()
        return EmailTemplateService.get_templates_by_category(category)

    @staticmethod
    def validate_context(template_id: str, context: Dict[str, str]) -> Tuple[bool, List[str]]:
        """
        Returns:
            (is_valid, missing_variables); an unknown template is never valid.
        """
        template = EmailTemplateService.get_template(template_id)
        if template is None:
            return False, []
        missing = [name for name in template.variables if not (context.get(name) or '').strip()]
        return not missing, missing

    @staticmethod
    def get_template_preview(template_id: str) -> Optional[GeneratedEmail]:
        return EmailTemplateService.generate_email(template_id, SAMPLE_CONTEXT)

    @staticmethod
    def export_templates() -> str:
        return json.dumps([template.to_dict() for template in EMAIL_TEMPLATES], indent=2)

    @staticmethod
    def get_email_tips(category: str) -> List[str]:
        return list(EMAIL_TIPS.get(category, []))

    @staticmethod
    def context_for_application(user, application=None) -> Dict[str, str]:
        """Prefill what is known about the candidate and, if given, the application."""
        context = {'candidate_name': user.get_full_name() or user.username}
        if application is not None:
            context.update({
                'company_name': application.company,
                'position_title': application.job_title,
                'application_date': application.applied_at.strftime('%B %d, %Y'),
            })
            if application.contact_name:
                context['hiring_manager_name'] = application.contact_name
        return context
