from datetime import date

from django.contrib.auth import authenticate, get_user_model
from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from accounts.forms import RegistrationForm

User = get_user_model()


def registration_data(**overrides):
    data = {
        "name": "Ada Lovelace",
        "email": "Ada@Example.com",
        "password1": "Str0ngPass!",
        "password2": "Str0ngPass!",
        "birth_date": "1990-08-01",
        "mbti_type": "INTJ",
        "agree_to_terms": "on",
    }
    data.update(overrides)
    return data


class RegistrationFormTests(TestCase):
    def test_valid_registration(self) -> None:
        form = RegistrationForm(data=registration_data())
        self.assertTrue(form.is_valid(), form.errors)
        user = form.save()

        self.assertEqual(user.username, "ada@example.com")
        self.assertEqual(user.email, "ada@example.com")
        self.assertEqual(user.first_name, "Ada")
        self.assertEqual(user.last_name, "Lovelace")
        self.assertEqual(user.zodiac_sign, "leo")
        self.assertEqual(user.mbti_type, "INTJ")
        self.assertFalse(user.email_verified)
        self.assertTrue(user.check_password("Str0ngPass!"))

    def test_field_messages(self) -> None:
        form = RegistrationForm(data=registration_data(
            name="A",
            password1="weakpassword",
            password2="weakpassword",
            birth_date="2020-01-01",
            mbti_type="",
            agree_to_terms="",
        ))
        self.assertFalse(form.is_valid())
        self.assertEqual(form.errors["name"], ["Name must be at least 2 characters"])
        self.assertEqual(form.errors["password1"], ["Password must contain uppercase, lowercase, and number"])
        self.assertEqual(form.errors["birth_date"], ["You must be at least 13 years old"])
        self.assertEqual(form.errors["mbti_type"], ["Please select your MBTI type"])
        self.assertEqual(form.errors["agree_to_terms"], ["You must agree to the terms and conditions"])

    def test_required_messages(self) -> None:
        form = RegistrationForm(data=registration_data(name="", email="", birth_date=""))
        self.assertFalse(form.is_valid())
        self.assertEqual(form.errors["name"], ["Full name is required"])
        self.assertEqual(form.errors["email"], ["Email is required"])
        self.assertEqual(form.errors["birth_date"], ["Birth date is required"])

    def test_password_rules(self) -> None:
        form = RegistrationForm(data=registration_data(password1="Sh0rt", password2="Sh0rt"))
        self.assertFalse(form.is_valid())
        self.assertEqual(form.errors["password1"], ["Password must be at least 8 characters"])

        form = RegistrationForm(data=registration_data(password2="Different1"))
        self.assertFalse(form.is_valid())
        self.assertIn("password2", form.errors)

    def test_duplicate_email(self) -> None:
        User.objects.create_user(username="someone", email="ada@example.com", password="Secret123")
        form = RegistrationForm(data=registration_data())
        self.assertFalse(form.is_valid())
        self.assertEqual(form.errors["email"], ["An account with this email already exists."])


class EmailOrUsernameBackendTests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(
            username="grace", email="grace@example.com", password="Secret123"
        )

    def test_login_with_username_or_email(self) -> None:
        self.assertEqual(authenticate(username="grace", password="Secret123"), self.user)
        self.assertEqual(authenticate(username="GRACE@example.com", password="Secret123"), self.user)

    def test_wrong_password_or_unknown_user(self) -> None:
        self.assertIsNone(authenticate(username="grace", password="nope"))
        self.assertIsNone(authenticate(username="nobody@example.com", password="Secret123"))

    def test_inactive_user(self) -> None:
        self.user.is_active = False
        self.user.save()
        self.assertIsNone(authenticate(username="grace", password="Secret123"))


class SignupViewTests(TestCase):
    def test_signup_logs_in_and_goes_to_profile(self) -> None:
        response = self.client.post(reverse("signup"), registration_data())
        self.assertRedirects(response, reverse("profile_edit"), fetch_redirect_response=False)

        user = User.objects.get(username="ada@example.com")
        self.assertEqual(int(self.client.session["_auth_user_id"]), user.pk)

    def test_signed_in_user_is_sent_to_dashboard(self) -> None:
        user = User.objects.create_user(username="grace", password="Secret123")
        self.client.force_login(user)
        response = self.client.get(reverse("signup"))
        self.assertRedirects(response, reverse("dashboard"), fetch_redirect_response=False)


class UserAPITests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(
            username="hedy", password="Secret123", birth_date=date(1990, 11, 9)
        )
        self.client = APIClient()
        self.client.force_authenticate(self.user)

    def test_me(self) -> None:
        response = self.client.get("/api/users/me/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["zodiac_sign"], "scorpio")
        self.assertEqual(response.data["zodiac_display"], "Scorpio ♏")
        self.assertNotIn("password", response.data)

    def test_verify_email(self) -> None:
        response = self.client.post("/api/users/verify-email/")
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.data["email_verified"])
        self.user.refresh_from_db()
        self.assertTrue(self.user.email_verified)

    def test_users_only_see_themselves(self) -> None:
        other = User.objects.create_user(username="other", password="Secret123")
        self.assertEqual(self.client.get("/api/users/").status_code, 403)
        self.assertEqual(self.client.get(f"/api/users/{other.id}/").status_code, 403)

    def test_cannot_grant_admin_role(self) -> None:
        response = self.client.patch(f"/api/users/{self.user.id}/", {"role": "ADMIN"}, format="json")
        self.assertEqual(response.status_code, 400)
