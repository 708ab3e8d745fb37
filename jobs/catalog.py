"""
Jobs catalog

In-memory job records and the fixed mock catalog served by the search and
matching engines. Listings are never persisted; saved jobs and applications
refer to them by their string id.
"""
from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Dict, List, Optional


JOB_CATEGORIES = [
    'Technology',
    'Marketing',
    'Sales',
    'Design',
    'Finance',
    'Human Resources',
    'Operations',
    'Customer Service',
    'Engineering',
    'Data Science',
    'Product Management',
    'Legal',
    'Healthcare',
    'Education',
    'Consulting',
    'Research',
    'Administrative',
    'Business Development',
]

EXPERIENCE_LEVELS = [
    ('entry', 'Entry Level (0-1 years)'),
    ('junior', 'Junior (1-3 years)'),
    ('mid', 'Mid Level (3-5 years)'),
    ('senior', 'Senior (5-8 years)'),
    ('lead', 'Lead (8+ years)'),
    ('executive', 'Executive (10+ years)'),
]

JOB_TYPES = [
    ('full-time', 'Full Time'),
    ('part-time', 'Part Time'),
    ('contract', 'Contract'),
    ('freelance', 'Freelance'),
    ('internship', 'Internship'),
]

WORK_MODELS = [
    ('onsite', 'On-site'),
    ('remote', 'Remote'),
    ('hybrid', 'Hybrid'),
]

COMPANY_SIZES = [
    ('startup', 'Startup (1-10)'),
    ('small', 'Small (11-50)'),
    ('medium', 'Medium (51-200)'),
    ('large', 'Large (201-1000)'),
    ('enterprise', 'Enterprise (1000+)'),
]

SALARY_PERIODS = ['hourly', 'monthly', 'yearly']


@dataclass
class JobLocation:
    city: str
    state: str
    country: str = 'USA'
    remote: bool = False
    hybrid: bool = False

    @property
    def display(self) -> str:
        return f"{self.city}, {self.state}"


@dataclass
class SalaryRange:
    min: int
    max: int
    currency: str = 'USD'
    period: str = 'yearly'


@dataclass
class Job:
    """
    A single job listing.

    Field names follow the listing vocabulary used across the site
    (job_type, experience, work_model, company_size).
    """

    id: str
    title: str
    company: str
    location: JobLocation
    description: str
    requirements: List[str]
    responsibilities: List[str]
    salary: SalaryRange
    job_type: str
    experience: str
    department: str
    category: str
    tags: List[str]
    benefits: List[str]
    posted_date: date
    company_size: str
    industry: str
    work_model: str
    application_count: int = 0
    is_urgent: bool = False
    featured: bool = False
    company_description: str = ''
    company_rating: Optional[float] = None
    company_logo: str = ''
    application_deadline: Optional[date] = None
    contact_email: str = ''
    application_url: str = ''

    @classmethod
    def from_dict(cls, data: Dict) -> 'Job':
        data = dict(data)
        data['location'] = JobLocation(**data['location'])
        data['salary'] = SalaryRange(**data['salary'])
        data['posted_date'] = date.fromisoformat(data['posted_date'])
        if data.get('application_deadline'):
            data['application_deadline'] = date.fromisoformat(data['application_deadline'])
        return cls(**data)

    def to_dict(self) -> Dict[str, object]:
        payload = asdict(self)
        payload['posted_date'] = self.posted_date.isoformat()
        if self.application_deadline:
            payload['application_deadline'] = self.application_deadline.isoformat()
        return payload


@dataclass
class JobMatch:
    """Match result for one job against one user profile."""

    job: Job
    match_score: int
    match_reasons: List[str] = field(default_factory=list)
    missing_skills: List[str] = field(default_factory=list)
    strengths: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            'job': self.job.to_dict(),
            'match_score': self.match_score,
            'match_reasons': self.match_reasons,
            'missing_skills': self.missing_skills,
            'strengths': self.strengths,
        }


_MOCK_JOB_DATA = [
    {
        'id': 'job-1',
        'title': 'Senior Frontend Developer',
        'company': 'TechCorp Solutions',
        'location': {'city': 'San Francisco', 'state': 'CA', 'country': 'USA', 'remote': True, 'hybrid': True},
        'description': (
            'We are looking for a passionate Senior Frontend Developer to join our growing team. '
            'You will be responsible for building beautiful, responsive user interfaces using modern '
            'technologies like React, TypeScript, and Next.js.'
        ),
        'requirements': [
            '5+ years of experience in frontend development',
            'Expert knowledge of React and TypeScript',
            'Experience with Next.js and server-side rendering',
            'Strong understanding of modern CSS and responsive design',
            'Experience with state management (Redux, Zustand, etc.)',
            'Familiarity with testing frameworks (Jest, React Testing Library)',
            'Experience with Git and modern development workflows',
        ],
        'responsibilities': [
            'Develop and maintain frontend applications using React and TypeScript',
            'Collaborate with designers to implement pixel-perfect UI/UX',
            'Optimize application performance and ensure cross-browser compatibility',
            'Write clean, maintainable, and well-documented code',
            'Mentor junior developers and contribute to code reviews',
            'Participate in agile development processes and sprint planning',
        ],
        'salary': {'min': 120000, 'max': 180000, 'currency': 'USD', 'period': 'yearly'},
        'job_type': 'full-time',
        'experience': 'senior',
        'department': 'Engineering',
        'category': 'Technology',
        'tags': ['React', 'TypeScript', 'Next.js', 'Frontend', 'JavaScript', 'CSS'],
        'benefits': ['Health Insurance', 'Dental Insurance', '401k', 'Remote Work', 'Flexible Hours', 'Stock Options'],
        'posted_date': '2025-09-08',
        'company_size': 'medium',
        'industry': 'Software',
        'work_model': 'hybrid',
        'application_count': 47,
        'is_urgent': False,
        'featured': True,
        'company_rating': 4.5,
        'company_description': (
            'TechCorp Solutions is a leading technology company focused on building innovative '
            'software solutions for modern businesses.'
        ),
        'application_url': 'https://example.com/apply',
    },
    {
        'id': 'job-2',
        'title': 'Product Manager',
        'company': 'InnovateLabs',
        'location': {'city': 'New York', 'state': 'NY', 'country': 'USA', 'remote': False, 'hybrid': True},
        'description': (
            'Join our dynamic product team as a Product Manager and help shape the future of our SaaS '
            'platform. You will work closely with engineering, design, and business stakeholders to '
            'define and execute product strategy.'
        ),
        'requirements': [
            '3-5 years of product management experience',
            'Experience with SaaS products and B2B markets',
            'Strong analytical and problem-solving skills',
            'Excellent communication and presentation skills',
            'Experience with agile development methodologies',
            'Data-driven approach to decision making',
            "Bachelor's degree in Business, Engineering, or related field",
        ],
        'responsibilities': [
            'Define product roadmap and prioritize features based on business impact',
            'Work with engineering teams to deliver high-quality products on time',
            'Conduct market research and competitive analysis',
            'Gather and analyze user feedback to inform product decisions',
            'Create detailed product requirements and user stories',
            'Present product updates to stakeholders and leadership team',
        ],
        'salary': {'min': 110000, 'max': 160000, 'currency': 'USD', 'period': 'yearly'},
        'job_type': 'full-time',
        'experience': 'mid',
        'department': 'Product',
        'category': 'Product Management',
        'tags': ['Product Management', 'SaaS', 'Analytics', 'Strategy', 'Agile'],
        'benefits': ['Health Insurance', 'Dental Insurance', 'Vision Insurance', '401k', 'PTO', 'Learning Budget'],
        'posted_date': '2025-09-07',
        'company_size': 'large',
        'industry': 'Software',
        'work_model': 'hybrid',
        'application_count': 92,
        'is_urgent': True,
        'featured': False,
        'company_rating': 4.2,
        'company_description': (
            'InnovateLabs is a fast-growing SaaS company that helps businesses optimize their '
            'operations through intelligent automation.'
        ),
        'contact_email': 'careers@innovatelabs.com',
    },
    {
        'id': 'job-3',
        'title': 'UX/UI Designer',
        'company': 'Creative Studio Pro',
        'location': {'city': 'Austin', 'state': 'TX', 'country': 'USA', 'remote': True, 'hybrid': False},
        'description': (
            'We are seeking a talented UX/UI Designer to create intuitive and engaging user experiences '
            'for our diverse client portfolio. This is a fully remote position with flexible working hours.'
        ),
        'requirements': [
            '3+ years of UX/UI design experience',
            'Proficiency in Figma, Adobe Creative Suite, and prototyping tools',
            'Strong portfolio demonstrating user-centered design process',
            'Experience with user research and usability testing',
            'Knowledge of HTML/CSS basics',
            'Excellent visual design skills and attention to detail',
            'Strong communication and collaboration skills',
        ],
        'responsibilities': [
            'Design user interfaces for web and mobile applications',
            'Conduct user research and create user personas',
            'Develop wireframes, prototypes, and high-fidelity designs',
            'Collaborate with developers to ensure design implementation',
            'Create and maintain design systems and style guides',
            'Present design concepts to clients and stakeholders',
        ],
        'salary': {'min': 75000, 'max': 120000, 'currency': 'USD', 'period': 'yearly'},
        'job_type': 'full-time',
        'experience': 'mid',
        'department': 'Design',
        'category': 'Design',
        'tags': ['UX Design', 'UI Design', 'Figma', 'Prototyping', 'User Research'],
        'benefits': ['Health Insurance', '100% Remote', 'Flexible Hours', 'Equipment Allowance', 'Professional Development'],
        'posted_date': '2025-09-06',
        'company_size': 'small',
        'industry': 'Design Agency',
        'work_model': 'remote',
        'application_count': 156,
        'is_urgent': False,
        'featured': True,
        'company_rating': 4.7,
        'company_description': (
            'Creative Studio Pro is a boutique design agency specializing in digital product design '
            'for startups and established brands.'
        ),
        'application_url': 'https://creativestudiopro.com/careers',
    },
    {
        'id': 'job-4',
        'title': 'Data Scientist',
        'company': 'DataDriven Analytics',
        'location': {'city': 'Seattle', 'state': 'WA', 'country': 'USA', 'remote': False, 'hybrid': True},
        'description': (
            'Join our data science team to extract insights from large datasets and build machine '
            'learning models that drive business decisions. Work with cutting-edge technologies in a '
            'collaborative environment.'
        ),
        'requirements': [
            "PhD or Master's in Data Science, Statistics, or related field",
            '2+ years of experience in data science or analytics',
            'Proficiency in Python, R, and SQL',
            'Experience with machine learning frameworks (TensorFlow, PyTorch, Scikit-learn)',
            'Strong statistical analysis and modeling skills',
            'Experience with cloud platforms (AWS, GCP, Azure)',
            'Excellent problem-solving and communication skills',
        ],
        'responsibilities': [
            'Develop and deploy machine learning models for business applications',
            'Analyze large datasets to identify trends and patterns',
            'Create data visualizations and reports for stakeholders',
            'Collaborate with engineering teams to implement data solutions',
            'Design and conduct A/B tests and experiments',
            'Stay current with latest developments in data science and ML',
        ],
        'salary': {'min': 130000, 'max': 200000, 'currency': 'USD', 'period': 'yearly'},
        'job_type': 'full-time',
        'experience': 'mid',
        'department': 'Data',
        'category': 'Data Science',
        'tags': ['Machine Learning', 'Python', 'Statistics', 'SQL', 'Analytics', 'AI'],
        'benefits': ['Health Insurance', 'Dental Insurance', '401k Match', 'Research Budget', 'Conference Attendance'],
        'posted_date': '2025-09-05',
        'company_size': 'medium',
        'industry': 'Analytics',
        'work_model': 'hybrid',
        'application_count': 78,
        'is_urgent': False,
        'featured': False,
        'company_rating': 4.3,
        'company_description': (
            'DataDriven Analytics helps companies leverage their data to make better business '
            'decisions through advanced analytics and machine learning.'
        ),
        'contact_email': 'hiring@datadriven.com',
    },
    {
        'id': 'job-5',
        'title': 'Marketing Manager',
        'company': 'GrowthHackers Inc',
        'location': {'city': 'Los Angeles', 'state': 'CA', 'country': 'USA', 'remote': True, 'hybrid': True},
        'description': (
            'Lead our marketing efforts to drive user acquisition and brand awareness. This role '
            'combines strategic thinking with hands-on execution across digital marketing channels.'
        ),
        'requirements': [
            '4+ years of digital marketing experience',
            'Experience with performance marketing and growth hacking',
            'Proficiency in marketing tools (Google Ads, Facebook Ads, HubSpot)',
            'Strong analytical skills and data-driven approach',
            'Experience with SEO, content marketing, and social media',
            'Excellent written and verbal communication skills',
            "Bachelor's degree in Marketing, Business, or related field",
        ],
        'responsibilities': [
            'Develop and execute comprehensive marketing strategies',
            'Manage digital advertising campaigns across multiple channels',
            'Create and oversee content marketing initiatives',
            'Analyze marketing performance and optimize campaigns',
            'Collaborate with product and sales teams on go-to-market strategies',
            'Manage marketing budget and vendor relationships',
        ],
        'salary': {'min': 85000, 'max': 130000, 'currency': 'USD', 'period': 'yearly'},
        'job_type': 'full-time',
        'experience': 'mid',
        'department': 'Marketing',
        'category': 'Marketing',
        'tags': ['Digital Marketing', 'Growth Hacking', 'SEO', 'Content Marketing', 'Analytics'],
        'benefits': ['Health Insurance', 'Stock Options', 'Unlimited PTO', 'Marketing Budget', 'Remote Work'],
        'posted_date': '2025-09-04',
        'company_size': 'startup',
        'industry': 'Marketing Technology',
        'work_model': 'remote',
        'application_count': 134,
        'is_urgent': True,
        'featured': True,
        'company_rating': 4.1,
        'company_description': (
            'GrowthHackers Inc is a marketing technology startup that helps businesses accelerate '
            'their growth through innovative marketing strategies.'
        ),
        'application_url': 'https://growthhackers.com/careers',
    },
    {
        'id': 'job-6',
        'title': 'Full Stack Developer',
        'company': 'WebTech Solutions',
        'location': {'city': 'Denver', 'state': 'CO', 'country': 'USA', 'remote': False, 'hybrid': False},
        'description': (
            'Join our development team to build scalable web applications using modern technologies. '
            'Work on both frontend and backend systems in an agile environment.'
        ),
        'requirements': [
            '3+ years of full stack development experience',
            'Proficiency in JavaScript, Node.js, and React',
            'Experience with databases (PostgreSQL, MongoDB)',
            'Knowledge of cloud services and deployment',
            'Understanding of RESTful APIs and microservices',
            'Experience with version control (Git) and CI/CD',
            'Strong problem-solving and debugging skills',
        ],
        'responsibilities': [
            'Develop and maintain web applications using modern frameworks',
            'Design and implement RESTful APIs and database schemas',
            'Write clean, efficient, and well-tested code',
            'Collaborate with cross-functional teams on feature development',
            'Optimize application performance and scalability',
            'Participate in code reviews and technical discussions',
        ],
        'salary': {'min': 95000, 'max': 140000, 'currency': 'USD', 'period': 'yearly'},
        'job_type': 'full-time',
        'experience': 'mid',
        'department': 'Engineering',
        'category': 'Technology',
        'tags': ['JavaScript', 'Node.js', 'React', 'Full Stack', 'APIs', 'Database'],
        'benefits': ['Health Insurance', 'Dental Insurance', '401k', 'Gym Membership', 'Learning Stipend'],
        'posted_date': '2025-09-03',
        'company_size': 'medium',
        'industry': 'Software',
        'work_model': 'onsite',
        'application_count': 89,
        'is_urgent': False,
        'featured': False,
        'company_rating': 4.0,
        'company_description': (
            'WebTech Solutions builds custom web applications and digital solutions for businesses '
            'across various industries.'
        ),
        'contact_email': 'careers@webtech.com',
    },
    {
        'id': 'job-7',
        'title': 'DevOps Engineer',
        'company': 'CloudFirst Technologies',
        'location': {'city': 'Chicago', 'state': 'IL', 'country': 'USA', 'remote': True, 'hybrid': False},
        'description': (
            'Help us build and maintain scalable cloud infrastructure. This remote position offers '
            'the opportunity to work with cutting-edge DevOps tools and practices.'
        ),
        'requirements': [
            '3+ years of DevOps or infrastructure experience',
            'Strong experience with AWS or Azure cloud platforms',
            'Proficiency in containerization (Docker, Kubernetes)',
            'Experience with Infrastructure as Code (Terraform, CloudFormation)',
            'Knowledge of CI/CD pipelines and automation tools',
            'Scripting skills in Python, Bash, or PowerShell',
            'Understanding of monitoring and logging solutions',
        ],
        'responsibilities': [
            'Design and maintain cloud infrastructure on AWS/Azure',
            'Implement and manage CI/CD pipelines',
            'Automate deployment and scaling processes',
            'Monitor system performance and troubleshoot issues',
            'Implement security best practices and compliance',
            'Collaborate with development teams on infrastructure needs',
        ],
        'salary': {'min': 110000, 'max': 165000, 'currency': 'USD', 'period': 'yearly'},
        'job_type': 'full-time',
        'experience': 'mid',
        'department': 'Engineering',
        'category': 'Technology',
        'tags': ['DevOps', 'AWS', 'Kubernetes', 'Docker', 'CI/CD', 'Infrastructure'],
        'benefits': ['Health Insurance', 'Stock Options', '100% Remote', 'Tech Allowance', 'Certification Reimbursement'],
        'posted_date': '2025-09-02',
        'company_size': 'large',
        'industry': 'Cloud Services',
        'work_model': 'remote',
        'application_count': 67,
        'is_urgent': False,
        'featured': True,
        'company_rating': 4.6,
        'company_description': (
            'CloudFirst Technologies provides cloud infrastructure and DevOps solutions for '
            'enterprises looking to modernize their technology stack.'
        ),
        'application_url': 'https://cloudfirst.tech/jobs',
    },
    {
        'id': 'job-8',
        'title': 'Sales Development Representative',
        'company': 'SalesForce Pro',
        'location': {'city': 'Miami', 'state': 'FL', 'country': 'USA', 'remote': False, 'hybrid': True},
        'description': (
            'Kickstart your sales career with our fast-growing SaaS company. Perfect for motivated '
            'individuals looking to develop sales skills and advance quickly.'
        ),
        'requirements': [
            '1-2 years of sales or customer-facing experience',
            'Excellent communication and interpersonal skills',
            'Goal-oriented with a track record of meeting targets',
            'Experience with CRM software (Salesforce, HubSpot)',
            "Bachelor's degree preferred",
            'Resilience and ability to handle rejection',
            'Eagerness to learn and grow in sales',
        ],
        'responsibilities': [
            'Generate and qualify leads through outbound prospecting',
            'Schedule demos and meetings for Account Executives',
            'Maintain accurate records in CRM system',
            'Follow up with prospects and nurture relationships',
            'Collaborate with marketing team on lead generation',
            'Meet monthly and quarterly activity and conversion goals',
        ],
        'salary': {'min': 45000, 'max': 65000, 'currency': 'USD', 'period': 'yearly'},
        'job_type': 'full-time',
        'experience': 'junior',
        'department': 'Sales',
        'category': 'Sales',
        'tags': ['Sales', 'Lead Generation', 'CRM', 'Prospecting', 'SaaS'],
        'benefits': ['Base + Commission', 'Health Insurance', 'Career Development', 'Team Events'],
        'posted_date': '2025-09-01',
        'company_size': 'medium',
        'industry': 'Software',
        'work_model': 'hybrid',
        'application_count': 201,
        'is_urgent': True,
        'featured': False,
        'company_rating': 3.9,
        'company_description': (
            'SalesForce Pro provides sales automation and CRM solutions for small and medium businesses.'
        ),
        'contact_email': 'sdr-hiring@salesforcepro.com',
    },
]

MOCK_JOBS: List[Job] = [Job.from_dict(item) for item in _MOCK_JOB_DATA]
