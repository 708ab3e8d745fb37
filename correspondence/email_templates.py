"""
Email templates for job applications and follow-ups.

Placeholders are ``{{name}}`` or ``{{name || 'fallback text'}}``; the fallback
may itself contain simple placeholders.
"""
from dataclasses import asdict, dataclass, field
from typing import Dict, List

CATEGORIES = ['application', 'followup', 'thankyou', 'networking', 'rejection_response']

CATEGORY_LABELS = {
    'application': 'Application',
    'followup': 'Follow-up',
    'thankyou': 'Thank You',
    'networking': 'Networking',
    'rejection_response': 'Rejection Response',
}

CONTEXT_VARIABLES = [
    'candidate_name',
    'company_name',
    'position_title',
    'hiring_manager_name',
    'interview_date',
    'application_date',
    'referrer_name',
    'custom_message',
]


@dataclass(frozen=True)
class EmailTemplate:
    id: str
    name: str
    category: str
    subject: str
    body: str
    variables: List[str] = field(default_factory=list)
    description: str = ''

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


EMAIL_TEMPLATES: List[EmailTemplate] = [
    EmailTemplate(
        id='application-cover-letter',
        name='Job Application Cover Letter',
        category='application',
        subject='Application for {{position_title}} Position at {{company_name}}',
        body="""Dear {{hiring_manager_name || 'Hiring Manager'}},

I am writing to express my strong interest in the {{position_title}} position at {{company_name}}. With my background in [relevant field] and passion for [relevant area], I am excited about the opportunity to contribute to your team.

{{custom_message || 'I believe my skills in [specific skills] and experience with [relevant experience] make me a strong candidate for this role. I am particularly drawn to {{company_name}} because of [specific reason related to company/mission].'}}

I have attached my resume for your review and would welcome the opportunity to discuss how my experience and enthusiasm can benefit {{company_name}}. Thank you for considering my application.

Best regards,
{{candidate_name}}""",
        variables=['candidate_name', 'company_name', 'position_title', 'hiring_manager_name', 'custom_message'],
        description='Professional cover letter for job applications',
    ),
    EmailTemplate(
        id='application-followup',
        name='Application Follow-up',
        category='followup',
        subject='Following up on {{position_title}} Application',
        body="""Dear {{hiring_manager_name || 'Hiring Manager'}},

I hope this message finds you well. I wanted to follow up on my application for the {{position_title}} position at {{company_name}}, which I submitted on {{application_date}}.

I remain very interested in this opportunity and would love to learn more about the role and how I can contribute to your team. If you need any additional information or would like to schedule an interview, please don't hesitate to reach out.

Thank you for your time and consideration. I look forward to hearing from you.

Best regards,
{{candidate_name}}""",
        variables=['candidate_name', 'company_name', 'position_title', 'hiring_manager_name', 'application_date'],
        description='Follow-up email for job applications after 1-2 weeks',
    ),
    EmailTemplate(
        id='interview-thankyou',
        name='Post-Interview Thank You',
        category='thankyou',
        subject='Thank you for the {{position_title}} interview',
        body="""Dear {{hiring_manager_name || 'Hiring Manager'}},

Thank you for taking the time to speak with me about the {{position_title}} position at {{company_name}} on {{interview_date}}. I enjoyed learning more about the role and your team's innovative approach to [specific topic discussed].

Our conversation reinforced my enthusiasm for this opportunity, particularly [specific aspect discussed]. I'm excited about the possibility of contributing my skills in [relevant skills] to help {{company_name}} achieve its goals.

{{custom_message || 'I wanted to follow up on [specific point from interview] and reiterate my strong interest in joining your team.'}}

Please don't hesitate to reach out if you need any additional information. I look forward to hearing about the next steps.

Best regards,
{{candidate_name}}""",
        variables=[
            'candidate_name', 'company_name', 'position_title', 'hiring_manager_name', 'interview_date',
            'custom_message',
        ],
        description='Thank you email to send within 24 hours of an interview',
    ),
    EmailTemplate(
        id='networking-introduction',
        name='Networking Introduction',
        category='networking',
        subject='Introduction from {{referrer_name}} - Interested in {{company_name}}',
        body="""Dear {{hiring_manager_name || 'Hiring Team'}},

I hope this email finds you well. {{referrer_name}} suggested I reach out to you regarding potential opportunities at {{company_name}}.

I am a [your title/background] with experience in [relevant areas], and I'm very interested in learning more about {{company_name}} and any current or upcoming opportunities that might be a good fit.

{{custom_message || 'I would love the opportunity to connect and learn more about your team and how I might contribute to the continued success of {{company_name}}.'}}

I've attached my resume for your reference. Would you be available for a brief conversation in the coming weeks?

Thank you for your time, and I look forward to hearing from you.

Best regards,
{{candidate_name}}""",
        variables=['candidate_name', 'company_name', 'hiring_manager_name', 'referrer_name', 'custom_message'],
        description='Introduction email for networking connections',
    ),
    EmailTemplate(
        id='rejection-response',
        name='Professional Response to Rejection',
        category='rejection_response',
        subject='Thank you for the opportunity - {{position_title}} at {{company_name}}',
        body="""Dear {{hiring_manager_name || 'Hiring Manager'}},

Thank you for informing me about your decision regarding the {{position_title}} position at {{company_name}}. While I'm disappointed that I won't be joining your team at this time, I appreciate the opportunity to learn more about {{company_name}} and the thoughtful interview process.

I remain very interested in {{company_name}} and would welcome the opportunity to be considered for future roles that might be a good fit. Please keep me in mind if similar positions become available.

{{custom_message || 'I wish you and your team continued success, and I hope our paths cross again in the future.'}}

Thank you again for your time and consideration.

Best regards,
{{candidate_name}}""",
        variables=['candidate_name', 'company_name', 'position_title', 'hiring_manager_name', 'custom_message'],
        description='Professional response to maintain relationships after rejection',
    ),
    EmailTemplate(
        id='salary-negotiation',
        name='Salary Negotiation',
        category='followup',
        subject='Re: {{position_title}} Offer Discussion',
        body="""Dear {{hiring_manager_name || 'Hiring Manager'}},

Thank you for extending the offer for the {{position_title}} position at {{company_name}}. I am excited about the opportunity to join your team and contribute to {{company_name}}'s success.

After careful consideration of the offer, I would like to discuss the compensation package. Based on my research of market rates for similar positions and my [relevant experience/qualifications], I was hoping we could explore a salary of [desired amount].

{{custom_message || 'I am confident that my skills and experience will bring significant value to the role, and I believe this adjustment would better reflect the market rate for this position.'}}

I'm very excited about this opportunity and look forward to discussing this further. Thank you for your understanding.

Best regards,
{{candidate_name}}""",
        variables=['candidate_name', 'company_name', 'position_title', 'hiring_manager_name', 'custom_message'],
        description='Professional salary negotiation email',
    ),
]

SAMPLE_CONTEXT = {
    'candidate_name': 'John Doe',
    'company_name': 'TechCorp Inc.',
    'position_title': 'Senior Software Engineer',
    'hiring_manager_name': 'Sarah Johnson',
    'interview_date': 'Friday, March 15th',
    'application_date': 'March 1st, 2024',
    'referrer_name': 'Mike Chen',
    'custom_message': 'I am particularly excited about working on your AI-powered solutions.',
}

SCENARIO_CATEGORIES = {
    'new_application': 'application',
    'follow_up': 'followup',
    'post_interview': 'thankyou',
    'networking': 'networking',
    'rejection': 'rejection_response',
}

EMAIL_TIPS = {
    'application': [
        'Research the company and mention specific details',
        'Keep it concise - aim for 3-4 paragraphs',
        'Include relevant keywords from the job description',
        'Proofread carefully for spelling and grammar',
    ],
    'followup': [
        'Wait 1-2 weeks before following up',
        'Keep it brief and professional',
        'Reiterate your interest in the position',
        'Avoid being pushy or demanding',
    ],
    'thankyou': [
        'Send within 24 hours of the interview',
        'Mention specific conversation points',
        'Reaffirm your interest and qualifications',
        'Keep it personal but professional',
    ],
    'networking': [
        'Mention your mutual connection early',
        "Be specific about what you're looking for",
        'Offer value, not just ask for help',
        'Suggest a brief coffee meeting or call',
    ],
    'rejection_response': [
        'Respond promptly and graciously',
        'Thank them for their time and consideration',
        'Express continued interest in the company',
        'Leave the door open for future opportunities',
    ],
}
