import json

from django.contrib.auth import get_user_model
from django.test import SimpleTestCase, TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from applications.services import ApplicationService
from correspondence.email_templates import EMAIL_TEMPLATES
from correspondence.services import EmailTemplateService

User = get_user_model()


class ReplaceVariablesTests(SimpleTestCase):
    def test_missing_value_renders_bracketed_name(self) -> None:
        self.assertEqual(EmailTemplateService.replace_variables("Hi {{name}}", {}), "Hi [name]")
        self.assertEqual(EmailTemplateService.replace_variables("Hi {{name}}", {"name": ""}), "Hi [name]")

    def test_fallback_is_used_only_when_value_is_missing(self) -> None:
        text = "{{greeting || 'Dear {{name}}'}}!"
        self.assertEqual(EmailTemplateService.replace_variables(text, {"name": "Bo"}), "Dear Bo!")
        self.assertEqual(EmailTemplateService.replace_variables(text, {"greeting": "Yo", "name": "Bo"}), "Yo!")

    def test_fallback_tolerates_spacing(self) -> None:
        self.assertEqual(EmailTemplateService.replace_variables("{{x||'y'}} {{x   ||   'z'}}", {}), "y z")


class EmailTemplateServiceTests(SimpleTestCase):
    def test_generate_cover_letter(self) -> None:
        email = EmailTemplateService.generate_email("application-cover-letter", {
            "candidate_name": "Ann Smith",
            "company_name": "Acme",
            "position_title": "Engineer",
        })
        self.assertEqual(email.subject, "Application for Engineer Position at Acme")
        self.assertTrue(email.body.startswith("Dear Hiring Manager,"))
        self.assertIn("I am particularly drawn to Acme because", email.body)
        self.assertTrue(email.body.endswith("Best regards,\nAnn Smith"))
        self.assertNotIn("{{", email.body)

    def test_unknown_template(self) -> None:
        self.assertIsNone(EmailTemplateService.generate_email("telegram", {}))
        self.assertEqual(EmailTemplateService.validate_context("telegram", {}), (False, []))

    def test_validate_context(self) -> None:
        self.assertEqual(
            EmailTemplateService.validate_context("application-followup", {
                "candidate_name": "Ann",
                "company_name": "Acme",
                "position_title": " ",
            }),
            (False, ["position_title", "hiring_manager_name", "application_date"]),
        )

    def test_preview_fills_everything(self) -> None:
        for template in EMAIL_TEMPLATES:
            preview = EmailTemplateService.get_template_preview(template.id)
            self.assertNotIn("{{", preview.subject + preview.body)

    def test_suggested_templates(self) -> None:
        self.assertEqual(
            [template.id for template in EmailTemplateService.get_suggested_templates("follow_up")],
            ["application-followup", "salary-negotiation"],
        )
        self.assertEqual(len(EmailTemplateService.get_suggested_templates("whatever")), len(EMAIL_TEMPLATES))

    def test_export_and_tips(self) -> None:
        exported = json.loads(EmailTemplateService.export_templates())
        self.assertEqual([item["id"] for item in exported], [template.id for template in EMAIL_TEMPLATES])
        self.assertEqual(len(EmailTemplateService.get_email_tips("thankyou")), 4)
        self.assertEqual(EmailTemplateService.get_email_tips("unknown"), [])


class EmailTemplateAPITests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(
            username="writer", password="Secret123", first_name="Ann", last_name="Smith"
        )
        self.client = APIClient()
        self.client.force_authenticate(self.user)

    def test_list_and_retrieve(self) -> None:
        response = self.client.get("/api/email-templates/", {"category": "followup"})
        self.assertEqual(len(response.data), 2)

        response = self.client.get("/api/email-templates/interview-thankyou/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["category"], "thankyou")
        self.assertEqual(response.data["preview"]["subject"], "Thank you for the Senior Software Engineer interview")

        self.assertEqual(self.client.get("/api/email-templates/telegram/").status_code, 404)

    def test_generate_from_application(self) -> None:
        application = ApplicationService.add_application(self.user, {"job_id": "job-2"})
        response = self.client.post("/api/email-templates/generate/", {
            "template_id": "application-followup",
            "application_id": application.id,
        }, format="json")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["subject"], "Following up on Product Manager Application")
        self.assertIn("at InnovateLabs, which I submitted on", response.data["body"])
        self.assertTrue(response.data["body"].endswith("Ann Smith"))
        self.assertEqual(response.data["missing_variables"], ["hiring_manager_name"])

    def test_generate_with_explicit_context(self) -> None:
        response = self.client.post("/api/email-templates/generate/", {
            "template_id": "rejection-response",
            "context": {"company_name": "Acme", "custom_message": "Keep in touch."},
        }, format="json")
        self.assertEqual(response.status_code, 200)
        self.assertIn("Keep in touch.", response.data["body"])
        self.assertIn("[position_title]", response.data["body"])

    def test_generate_errors(self) -> None:
        response = self.client.post("/api/email-templates/generate/", {"template_id": "telegram"}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["errors"], ["Unknown template: telegram"])

        other = User.objects.create_user(username="other", password="Secret123")
        application = ApplicationService.add_application(other, {"job_id": "job-1"})
        response = self.client.post("/api/email-templates/generate/", {
            "template_id": "application-followup",
            "application_id": application.id,
        }, format="json")
        self.assertEqual(response.status_code, 404)


class ComposeViewTests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(username="composer", password="Secret123")
        self.client.force_login(self.user)

    def test_compose_renders_email(self) -> None:
        response = self.client.post(reverse("email_compose", kwargs={"template_id": "interview-thankyou"}), {
            "company_name": "Acme",
            "position_title": "Engineer",
            "interview_date": "Monday",
        })
        self.assertEqual(response.status_code, 200)
        email = response.context["email"]
        self.assertEqual(email.subject, "Thank you for the Engineer interview")
        self.assertEqual(response.context["missing"], ["hiring_manager_name", "custom_message"])

    def test_unknown_template_is_404(self) -> None:
        response = self.client.get(reverse("email_compose", kwargs={"template_id": "telegram"}))
        self.assertEqual(response.status_code, 404)
