"""
LinkedIn Service Layer

OAuth authorization and profile import. In demo mode (the default) no
request leaves the server: the token is synthetic and the profile is a
canned example. Live mode uses LinkedIn's OpenID Connect endpoints.
"""
import logging
import secrets
import time
from typing import Dict, List, Optional
from urllib.parse import urlencode

import requests
from django.conf import settings
from django.db import transaction
from django.utils import timezone

from profiles.services import ProfileService
from .exceptions import LinkedInError
from .models import LinkedInConnection

logger = logging.getLogger(__name__)


AUTHORIZATION_URL = 'https://www.linkedin.com/oauth/v2/authorization'
TOKEN_URL = 'https://www.linkedin.com/oauth/v2/accessToken'
USERINFO_URL = 'https://api.linkedin.com/v2/userinfo'
SCOPES = ['openid', 'profile', 'email']
SESSION_STATE_KEY = 'linkedin_oauth_state'

DEMO_PROFILE = {
    'id': 'linkedin-user-123',
    'first_name': 'John',
    'last_name': 'Doe',
    'headline': 'Software Engineer at TechCorp',
    'summary': (
        'Passionate software engineer with 5+ years of experience in full-stack development. '
        'Specialized in React, Node.js, and cloud technologies.'
    ),
    'location': {'name': 'San Francisco Bay Area', 'country': 'United States'},
    'industry': 'Computer Software',
    'profile_picture': 'https://via.placeholder.com/150',
    'positions': [
        {
            'id': 'pos-1',
            'title': 'Senior Software Engineer',
            'company_name': 'TechCorp Inc.',
            'description': (
                'Led development of cloud-native applications using React and Node.js. '
                'Mentored junior developers and improved team productivity by 30%.'
            ),
            'start_date': {'month': 3, 'year': 2022},
            'end_date': None,
            'location': 'San Francisco, CA',
            'is_current': True,
        },
        {
            'id': 'pos-2',
            'title': 'Software Engineer',
            'company_name': 'StartupXYZ',
            'description': (
                'Developed and maintained web applications using modern JavaScript frameworks. '
                'Collaborated with cross-functional teams to deliver high-quality products.'
            ),
            'start_date': {'month': 6, 'year': 2020},
            'end_date': {'month': 2, 'year': 2022},
            'location': 'Mountain View, CA',
            'is_current': False,
        },
    ],
    'educations': [
        {
            'id': 'edu-1',
            'school_name': 'University of California, Berkeley',
            'degree_name': 'Bachelor of Science',
            'field_of_study': 'Computer Science',
            'start_date': {'year': 2016},
            'end_date': {'year': 2020},
        },
    ],
    'skills': [
        {'name': 'JavaScript', 'endorsement_count': 45},
        {'name': 'React', 'endorsement_count': 38},
        {'name': 'Node.js', 'endorsement_count': 32},
        {'name': 'Python', 'endorsement_count': 28},
        {'name': 'AWS', 'endorsement_count': 25},
        {'name': 'TypeScript', 'endorsement_count': 22},
    ],
}


def _month_date(value: Optional[Dict]) -> Optional[str]:
    if not value:
        return None
    return f"{value['year']}-{value.get('month', 1):02d}-01"


class LinkedInService:
    """OAuth flow, profile fetch and sync into the job seeker profile."""

    @staticmethod
    def is_demo_mode() -> bool:
        return getattr(settings, 'LINKEDIN_DEMO_MODE', True) or not getattr(settings, 'LINKEDIN_CLIENT_ID', '')

    @staticmethod
    def get_auth_url(session) -> str:
        """Authorization URL; the CSRF state is kept in the session for the callback."""
        state = secrets.token_urlsafe(16)
        session[SESSION_STATE_KEY] = state
        params = {
            'response_type': 'code',
            'client_id': getattr(settings, 'LINKEDIN_CLIENT_ID', '') or 'demo-client-id',
            'redirect_uri': settings.LINKEDIN_REDIRECT_URI,
            'scope': ' '.join(SCOPES),
            'state': state,
        }
        return f"{AUTHORIZATION_URL}?{urlencode(params)}"

    @staticmethod
    def validate_state(session, state: str) -> bool:
        # single use
        expected = session.pop(SESSION_STATE_KEY, None)
        return bool(expected and state) and secrets.compare_digest(expected, state)

    @staticmethod
    def exchange_code_for_token(code: str, state: str, session) -> str:
        if not LinkedInService.validate_state(session, state):
            raise LinkedInError('Invalid state parameter')
        if not code:
            raise LinkedInError('Missing authorization code')

        if LinkedInService.is_demo_mode():
            return f"mock-access-token-{int(time.time() * 1000)}"

        try:
            response = requests.post(
                TOKEN_URL,
                data={
                    'grant_type': 'authorization_code',
                    'code': code,
                    'redirect_uri': settings.LINKEDIN_REDIRECT_URI,
                    'client_id': settings.LINKEDIN_CLIENT_ID,
                    'client_secret': settings.LINKEDIN_CLIENT_SECRET,
                },
                timeout=getattr(settings, 'LINKEDIN_TIMEOUT_SECONDS', 10),
            )
            response.raise_for_status()
            token = response.json().get('access_token')
        except (requests.RequestException, ValueError) as exc:
            logger.warning("LinkedIn token exchange failed: %s", exc)
            raise LinkedInError('Could not complete LinkedIn authorization') from exc

        if not token:
            raise LinkedInError('LinkedIn did not return an access token')
        return token

    @staticmethod
    def fetch_profile(access_token: str) -> Dict:
        if LinkedInService.is_demo_mode():
            return DEMO_PROFILE

        try:
            response = requests.get(
                USERINFO_URL,
                headers={'Authorization': f"Bearer {access_token}"},
                timeout=getattr(settings, 'LINKEDIN_TIMEOUT_SECONDS', 10),
            )
            response.raise_for_status()
            info = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("LinkedIn profile fetch failed: %s", exc)
            raise LinkedInError('Could not fetch your LinkedIn profile') from exc

        # userinfo only carries identity claims
        locale = info.get('locale') or {}
        return {
            'id': info.get('sub', ''),
            'first_name': info.get('given_name', ''),
            'last_name': info.get('family_name', ''),
            'headline': '',
            'summary': '',
            'location': {'name': '', 'country': locale.get('country', '') if isinstance(locale, dict) else ''},
            'industry': '',
            'profile_picture': info.get('picture', ''),
            'positions': [],
            'educations': [],
            'skills': [],
        }

    @staticmethod
    def convert_to_user_profile(profile: Dict) -> Dict:
        """Map a LinkedIn profile onto our user and profile fields."""
        positions: List[Dict] = profile.get('positions') or []
        current = next((position for position in positions if position.get('is_current')), None)

        return {
            'name': f"{profile.get('first_name', '')} {profile.get('last_name', '')}".strip(),
            'current_title': current['title'] if current else profile.get('headline', ''),
            'location': (profile.get('location') or {}).get('name', ''),
            'bio': profile.get('summary', ''),
            'skills': [skill['name'] for skill in profile.get('skills') or []],
            'linkedin_url': f"https://linkedin.com/in/{profile['id']}" if profile.get('id') else '',
            'work_experience': [
                {
                    'title': position.get('title', ''),
                    'company': position.get('company_name', ''),
                    'description': position.get('description', ''),
                    'start_date': _month_date(position.get('start_date')),
                    'end_date': _month_date(position.get('end_date')),
                    'is_current': bool(position.get('is_current')),
                    'location': position.get('location', ''),
                }
                for position in positions
            ],
            'education': [
                {
                    'school': education.get('school_name', ''),
                    'degree': education.get('degree_name', ''),
                    'field_of_study': education.get('field_of_study', ''),
                    'start_year': (education.get('start_date') or {}).get('year'),
                    'end_year': (education.get('end_date') or {}).get('year'),
                }
                for education in profile.get('educations') or []
            ],
        }

    @staticmethod
    def connect(user, code: str, state: str, session) -> LinkedInConnection:
        """
        Complete authorization and store the token and profile.

        Raises:
            LinkedInError: State mismatch or LinkedIn request failure
        """
        token = LinkedInService.exchange_code_for_token(code, state, session)
        profile = LinkedInService.fetch_profile(token)
        connection, _ = LinkedInConnection.objects.update_or_create(
            user=user,
            defaults={
                'linkedin_id': profile.get('id', ''),
                'access_token': token,
                'profile_data': profile,
                'demo': LinkedInService.is_demo_mode(),
            },
        )
        logger.info("User %s connected LinkedIn (demo=%s)", user.pk, connection.demo)
        return connection

    @staticmethod
    def get_connection(user) -> Optional[LinkedInConnection]:
        return LinkedInConnection.objects.filter(user=user).first()

    @staticmethod
    def is_connected(user) -> bool:
        return LinkedInConnection.objects.filter(user=user).exists()

    @staticmethod
    @transaction.atomic
    def sync_with_profile(user) -> Dict:
        """
        Copy the stored LinkedIn profile into the user and job seeker profile.

        Returns:
            The converted updates that were applied

        Raises:
            LinkedInError: No stored LinkedIn profile
            ValidationError: Imported values failed profile validation
        """
        connection = LinkedInService.get_connection(user)
        if connection is None or not connection.profile_data:
            raise LinkedInError('No LinkedIn profile found')

        updates = LinkedInService.convert_to_user_profile(connection.profile_data)

        first_name, _, last_name = updates['name'].partition(' ')
        if first_name:
            user.first_name = first_name
            user.last_name = last_name.strip()
            user.save(update_fields=['first_name', 'last_name'])

        profile_fields = {
            key: updates[key]
            for key in ['current_title', 'location', 'bio', 'skills', 'linkedin_url']
            if updates[key]
        }
        profile = ProfileService.update_profile(user, profile_fields)
        profile.work_experience = updates['work_experience']
        profile.education = updates['education']
        profile.save(update_fields=['work_experience', 'education', 'updated_at'])

        connection.last_synced_at = timezone.now()
        connection.save(update_fields=['last_synced_at'])
        logger.info("Synced LinkedIn profile into profile of user %s", user.pk)
        return updates

    @staticmethod
    def disconnect(user) -> bool:
        deleted, _ = LinkedInConnection.objects.filter(user=user).delete()
        if deleted:
            logger.info("User %s disconnected LinkedIn", user.pk)
        return deleted > 0
