import re

from django import forms
from django.contrib.auth.forms import UserCreationForm

from accounts.models import User
from guidance.mbti import MBTI_CHOICES
from guidance.zodiac import validate_birth_date

PASSWORD_PATTERN = re.compile(r'(?=.*[a-z])(?=.*[A-Z])(?=.*\d)')


class RegistrationForm(UserCreationForm):
    name = forms.CharField(
        label="Full name",
        required=False,
        widget=forms.TextInput(attrs={
            'placeholder': 'Full name',
            'class': 'form-control'
        })
    )
    email = forms.EmailField(
        error_messages={'required': 'Email is required'},
        widget=forms.EmailInput(attrs={
            'placeholder': 'Email',
            'class': 'form-control'
        })
    )
    password1 = forms.CharField(
        label="Password",
        widget=forms.PasswordInput(attrs={
            'placeholder': 'Password',
            'class': 'form-control'
        })
    )
    password2 = forms.CharField(
        label="Confirm Password",
        widget=forms.PasswordInput(attrs={
            'placeholder': 'Confirm Password',
            'class': 'form-control'
        })
    )
    birth_date = forms.DateField(
        error_messages={
            'required': 'Birth date is required',
            'invalid': 'Invalid date format',
        },
        widget=forms.DateInput(attrs={
            'type': 'date',
            'class': 'form-control'
        })
    )
    mbti_type = forms.ChoiceField(
        label="MBTI type",
        choices=[('', 'Select your type')] + MBTI_CHOICES,
        error_messages={
            'required': 'Please select your MBTI type',
            'invalid_choice': 'Please select a valid MBTI type',
        },
        widget=forms.Select(attrs={'class': 'form-select'})
    )
    agree_to_terms = forms.BooleanField(
        required=False,
        label="I agree to the terms and conditions",
    )

    class Meta:
        model = User
        fields = ['name', 'email', 'password1', 'password2', 'birth_date', 'mbti_type']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # the email doubles as the username
        self.fields.pop('username', None)

    def clean_name(self):
        name = (self.cleaned_data.get('name') or '').strip()
        if not name:
            raise forms.ValidationError("Full name is required")
        if len(name) < 2:
            raise forms.ValidationError("Name must be at least 2 characters")
        return name

    def clean_email(self):
        email = self.cleaned_data['email'].strip().lower()
        if User.objects.filter(email__iexact=email).exists() or User.objects.filter(username__iexact=email).exists():
            raise forms.ValidationError("An account with this email already exists.")
        return email

    def clean_password1(self):
        password = self.cleaned_data.get('password1') or ''
        if len(password) < 8:
            raise forms.ValidationError("Password must be at least 8 characters")
        if not PASSWORD_PATTERN.match(password):
            raise forms.ValidationError("Password must contain uppercase, lowercase, and number")
        return password

    def clean_birth_date(self):
        birth_date = self.cleaned_data['birth_date']
        error = validate_birth_date(birth_date)
        if error:
            raise forms.ValidationError(error)
        return birth_date

    def clean_agree_to_terms(self):
        if not self.cleaned_data.get('agree_to_terms'):
            raise forms.ValidationError("You must agree to the terms and conditions")
        return True

    def clean(self):
        cleaned_data = super().clean()
        password1 = cleaned_data.get("password1")
        password2 = cleaned_data.get("password2")

        if password1 and password2 and password1 != password2:
            self.add_error('password2', "Passwords do not match.")

        return cleaned_data

    def _post_clean(self):
        # UserCreationForm validates the password against the instance; give it the email first
        email = self.cleaned_data.get('email')
        if email:
            self.instance.username = email
        super()._post_clean()

    def save(self, commit=True):
        user = super().save(commit=False)
        first_name, _, last_name = self.cleaned_data['name'].partition(' ')
        user.username = self.cleaned_data['email']
        user.email = self.cleaned_data['email']
        user.first_name = first_name
        user.last_name = last_name.strip()
        user.birth_date = self.cleaned_data['birth_date']
        user.mbti_type = self.cleaned_data['mbti_type']
        user.email_verified = False
        user.profile_complete = False
        if commit:
            user.save()
        return user
