"""
Correspondence app views

API endpoints for browsing and rendering email templates.
"""
from django.http import Http404
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from applications.models import JobApplication
from .serializers import EmailTemplateSerializer, GenerateEmailSerializer
from .services import EmailTemplateService


class EmailTemplateViewSet(viewsets.ViewSet):
    """
    - GET: List templates, optionally ?category= or ?scenario=
    - GET {id}/: Template with tips and a sample preview
    - POST generate/: Render {"template_id", "context", "application_id"}
    """

    permission_classes = [IsAuthenticated]

    def list(self, request):
        category = request.query_params.get('category')
        scenario = request.query_params.get('scenario')
        if category:
            templates = EmailTemplateService.get_templates_by_category(category)
        elif scenario:
            templates = EmailTemplateService.get_suggested_templates(scenario)
        else:
            templates = EmailTemplateService.get_all_templates()
        return Response(EmailTemplateSerializer(templates, many=True).data)

    def retrieve(self, request, pk=None):
        template = EmailTemplateService.get_template(pk)
        if template is None:
            raise Http404(f"Template {pk} not found")
        return Response({
            **EmailTemplateSerializer(template).data,
            'tips': EmailTemplateService.get_email_tips(template.category),
            'preview': EmailTemplateService.get_template_preview(template.id).to_dict(),
        })

    @action(detail=False, methods=['post'])
    def generate(self, request):
        """
        POST /api/email-templates/generate/
        """
        serializer = GenerateEmailSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        template_id = serializer.validated_data['template_id']

        application = None
        application_id = serializer.validated_data.get('application_id')
        if application_id is not None:
            application = JobApplication.objects.filter(id=application_id, user=request.user).first()
            if application is None:
                raise Http404("Application not found")

        context = EmailTemplateService.context_for_application(request.user, application)
        context.update({
            key: value for key, value in serializer.validated_data.get('context', {}).items() if value
        })

        email = EmailTemplateService.generate_email(template_id, context)
        if email is None:
            return Response({'errors': [f"Unknown template: {template_id}"]}, status=status.HTTP_400_BAD_REQUEST)

        _, missing = EmailTemplateService.validate_context(template_id, context)
        return Response({**email.to_dict(), 'missing_variables': missing})
