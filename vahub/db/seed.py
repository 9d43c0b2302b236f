"""
Seed data - plan catalog, admin account, demo accounts, demo VAs and jobs.

Runs at every startup and is idempotent: each block only inserts when its
rows are missing, otherwise it resets the demo passwords/prices.
"""
import logging

from vahub.core.config import Settings
from vahub.db.database import Database
from vahub.db.repositories import Repositories

logger = logging.getLogger(__name__)


PLANS = [
    # id, name, price, job posts, messages, candidate unlocks, featured jobs
    ("free-plan", "Free", 0, 3, 0, 0, 0),
    ("pro-plan", "PRO", 29, 3, 75, 200, 0),
    ("premium-plan", "PREMIUM", 39, 10, 500, 200, 2),
]

ADMIN_ID = "admin-1"
DEMO_VA_ID = "va-demo-1"
DEMO_EMPLOYER_ID = "employer-demo-1"

FULL_TIME = "full-time work (8 hours/day)"

DEMO_VAS = [
    {
        "name": "Oliver",
        "headline": "Web Developer & Designer | Next.js & TypeScript Expert",
        "id_proof": 70, "hourly": 4.42, "monthly": 800,
        "education": "Bachelors degree",
        "bio": "I am a versatile Web Developer & Designer who builds high-performance web applications. "
               "I don't just write code; I design user-centric interfaces in Figma and bring them to life "
               "with modern technologies.",
        "skills": [("Figma", "2 - 5 years"), ("Next JS", "1 - 2 years"), ("Web Development", "2 - 5 years")],
    },
    {
        "name": "Mika-Ella",
        "headline": "Web Developer",
        "id_proof": 85, "hourly": 7.08, "monthly": 1280,
        "education": "Bachelors degree",
        "bio": "Experienced Software Developer and Frontend Developer with expertise in mobile and web "
               "application development. Passionate about creating exceptional user experiences through "
               "clean and efficient code.",
        "skills": [("Javascript", "2 - 5 years"), ("React JS", "1 - 2 years"), ("TailwindCSS", "1 - 2 years")],
    },
    {
        "name": "Ashley",
        "headline": "Web Developer/Full stack",
        "id_proof": 40, "hourly": 2.12, "monthly": 384,
        "education": "Bachelors degree",
        "bio": "Graduated from Cebu Technological University Danao Campus with a Bachelor of Science in "
               "Information Technology, Major in Programming. I am looking for opportunities to grow.",
        "skills": [("Web Design & Page Layout", "Less than 6 months"), ("React JS", "Less than 6 months"),
                   ("React Native", "Less than 6 months")],
    },
    {
        "name": "Angelito",
        "headline": "Offensive Security Engineer, Data Engineer, Graphic Artist, UI/UX Web Design, "
                    "Web Developer, Fullstack",
        "id_proof": 70, "hourly": 12.39, "monthly": 2240,
        "education": "Bachelors degree",
        "bio": "To be able to work in an environment that provides opportunities to practice my obtained "
               "knowledge and skills in the field of Information Technology.",
        "skills": [("Graphic Design", "2 - 5 years"), ("Data Analytics", "1 - 2 years"),
                   ("Cybersecurity", "2 - 5 years"), ("Web Development", "2 - 5 years")],
    },
    {
        "name": "Keito",
        "headline": "SEO Specialist|Web Developer|Technical VA",
        "id_proof": 80, "hourly": 5.31, "monthly": 960,
        "education": "Bachelors degree in Information Technology",
        "bio": "Hi, I'm Kit, your new Technical Virtual Assistant. With three years of experience in SEO, "
               "web development, technical support, and social media management, I bring a wealth of skills.",
        "skills": [("SEO", "2 - 5 years"), ("On-Page", "2 - 5 years"), ("Wordpress", "2 - 5 years")],
    },
    {
        "name": "Gerald",
        "headline": "Web Designer/Developer + VA",
        "id_proof": 85, "hourly": 8.85, "monthly": 1600,
        "education": "Bachelors degree",
        "bio": "Web Designer/Developer | Funnel Designer | WordPress | Virtual Assistant & Personal "
               "Assistant. I specialize first and foremost in Web Design and Front-End development.",
        "skills": [("Graphic Design", "2 - 5 years"), ("Web Design & Page Layout", "2 - 5 years"),
                   ("Wordpress", "2 - 5 years")],
    },
    {
        "name": "Royena",
        "headline": "Web Developer | PHP & WordPress Expert",
        "id_proof": 60, "hourly": 5.31, "monthly": 960,
        "education": "Associates degree",
        "bio": "Results-driven Full Stack Web Developer with 5+ years of experience building "
               "high-performance websites. Skilled in PHP, WordPress, Laravel, CodeIgniter, and modern "
               "frontend frameworks.",
        "skills": [("PHP", "2 - 5 years"), ("Wordpress", "2 - 5 years"), ("CSS", "2 - 5 years"),
                   ("HTML", "Less than 6 months")],
    },
    {
        "name": "Paul",
        "headline": "Senior Web Developer",
        "id_proof": 90, "hourly": 17.70, "monthly": 3200,
        "education": "Bachelors degree",
        "bio": "PHP, Laravel, AWS, MWS, SPAPI, Twilio, Coldfusion, Docker, Wordpress, Opencart, Payment "
               "gateways, API development, Html/Html5, Css/Css3/Scss/Sass, Bootstrap, Js, Jquery, Ajax.",
        "skills": [("PHP", "5+ years"), ("Laravel", "5+ years"), ("AWS", "2 - 5 years")],
    },
]

# id, title, description, salary min, salary max, job type, featured
DEMO_JOBS = [
    ("j1", "Warm-Call Appointment Setter - Remote",
     "Are you a great communicator who enjoys talking to people and making a positive impact? "
     "We are looking for a Warm-Call Appointment Setter to join...", 1000, 1200, "Full-Time", True),
    ("j2", "Warm Call Appointment Setter (NO COLD CALLING!)",
     "Are you a great communicator who enjoys talking to people and making a positive impact? "
     "We are looking for a Warm-Call Appointment...", 1000, 1200, "Full-Time", False),
    ("j3", "Full-Time Remote Sales Specialist (Chat-Based)",
     "We are a growing U.S.-based inventory buying company looking for a full-time chat-based "
     "Sales Specialist.", 800, 2500, "Full-Time", True),
    ("j4", "Assistant for Property Management",
     "We are seeking an organized and proactive Assistant to support our property management "
     "operations.", 650, 900, "Full-Time", False),
    ("j5", "Virtual Real Estate Assistant/Admin",
     "The Harbert Real Estate Group is a fast-growing real estate company, and we are currently seeking "
     "a dedicated, organized, and proactive Virtual Real Estate Assistant/Admin.", 500, 500, "Full-Time", False),
    ("j6", "Transaction Coordinator (FLUENT ENGLISH)",
     "MUST HAVE GREAT ENGLISH AS THIS IS A CLIENT RELATIONS POSITION. Texas-based real estate "
     "experience preferred.", 650, 800, "Full-Time", False),
    ("j7", "Multiple Virtual Assistant Roles!",
     "Team Growth are expanding. Open Roles: General Admin REVA, Executive Assistant, "
     "Marketing/Graphics VA, ISA Caller.", 500, 1000, "Full-Time", False),
    ("j8", "Digital Products VA - Etsy Store Builder",
     "We are a growing digital products and e-commerce company. We need someone exceptional to grow "
     "with us.", 400, 700, "Full-Time", False),
    ("j9", "Excel & Data Management Virtual Assistant",
     "We are looking for a dedicated Virtual Assistant with advanced Excel skills to join our team.",
     800, 800, "Full-Time", False),
    ("j10", "Social Media Video Editor (AI TikTok)",
     "Hiring immediately! We are looking for a full-time Social Media Content Creator who specializes "
     "in creating AI-generated TikTok videos at scale.", 700, 700, "Full-Time", True),
    ("j11", "SALES CLOSER - Buying from Sellers",
     "This is NOT a basic Sales VA or admin role. This is a real sales closer position for someone who "
     "is hungry and coachable.", 800, 2500, "Full-Time", False),
    ("j12", "Senior Full Stack Developer",
     "We're Acore Technology, a business technology and ERP solutions firm. Custom ERP systems, "
     "workflow automation.", 850, 1625, "Full-Time", True),
    ("j13", "Graphic Designer - 3 Month Project",
     "Arispheris is looking for a highly skilled and innovative Graphic Designer to join our team for "
     "a 3-month full-time project.", 700, 700, "Full-Time", False),
    ("j14", "Life Insurance Salesman",
     "All leads are inbound calls to your computer looking for help. Answering client phone calls "
     "about premium reduction.", 4000, 5000, "Gig", False),
    ("j15", "Landscape Architect",
     "We are seeking a talented and detail-oriented Landscape Architect with at least 5 years of "
     "experience.", 1000, 1500, "Full-Time", False),
    ("j16", "Site Planner & Project Manager",
     "Responsible for site planning, design, and layout to secure approvals for commercial and "
     "industrial projects.", 1000, 1500, "Full-Time", False),
    ("j17", "Figma Web Designer (Real Estate & Construction Brands)",
     "Job Title: Figma Web Designer (Real Estate & Construction Brands)\nCompany: JerryCo\n\n"
     "Job Type: Project-Based (Long-Term / Full-Time Opportunity)\nLocation: Remote\n\n"
     "About JerryCo\nJerryCo is a growing marketing and development agency focused on real estate, "
     "construction, and service-based brands.", 500, 500, "Full-Time", False),
    ("j18", "Web Designer & Page Builder (WordPress + AI Tools)",
     "We're a growing US-based digital marketing agency that builds websites and runs SEO for home "
     "service contractors (HVAC, roofing, plumbing, electrical). We need a sharp web designer/page "
     "builder who can take AI-generated pages from about 90% to 100%.", 700, 900, "Full-Time", False),
    ("j19", "Content Manager: Social Media & Web (WordPress + Elementor)",
     "We're not looking for someone who's \"pretty good.\" We need someone who's obsessive about "
     "details. The kind of person who notices when an image is 2 pixels off.", 0, 0, "Part-Time", False),
    ("j20", "Hiring: Shopify Web Designer + Amazon Specialist (Hair Brand) - Remote Gig",
     "Please be ready to start immediately. We are building and scaling a premium hair company "
     "(wigs, bundles, extensions) and are currently hiring.", 0, 0, "Gig", False),
    ("j21", "Web Designer (Squarespace, Wordpress, & Shopify)",
     "We are seeking a highly skilled and creative Web Designer with expert-level proficiency in "
     "Squarespace, Shopify, and WordPress.", 1000, 2000, "Full-Time", False),
    ("j22", "Graphic Designer/Wordpress Website Builder",
     "We are looking for a creative and detail-oriented Graphic Designer with Web Design experience to "
     "join our team. Location: Remote / Hybrid.", 780, 780, "Full-Time", False),
]

DEMO_JOB_SKILLS = {
    "j1": ["Outbound Sales", "Cold Calling", "Sales"],
    "j2": ["Appointment Setting", "Sales", "Outbound Calls"],
    "j3": ["Inbound Sales", "Outbound Sales", "Sales"],
    "j4": ["Real Estate Marketing", "Customer Support", "Property Management"],
    "j10": ["Video Editing", "Social Media", "AI Tools"],
    "j12": ["React JS", "Next JS", "Supabase"],
    "j13": ["Photoshop", "Graphic Design", "Canva"],
    "j17": ["Web Design & Page Layout", "Figma"],
    "j18": ["Graphic Design", "Web Design & Page Layout", "Wordpress"],
    "j19": ["Content Management", "Data Entry", "Elementor"],
    "j20": ["Shopify", "Amazon Specialist"],
    "j21": ["Shopify", "Squarespace", "Wordpress"],
    "j22": ["Graphic Design", "Wordpress"],
}


def seed_plans(repos: Repositories):
    if repos.plans.count() == 0:
        for plan in PLANS:
            repos.plans.create(*plan)
        logger.info("Seeded %d plans", len(PLANS))
    else:
        for plan_id, name, price, *_ in PLANS[1:]:
            repos.plans.update_price(plan_id, name, price)


def seed_admin(repos: Repositories, settings: Settings):
    if repos.users.count_by_role("admin") == 0:
        repos.users.create("System Admin", settings.admin_email, settings.admin_password,
                           role="admin", status="approved", user_id=ADMIN_ID)
        logger.info("Created admin account %s", settings.admin_email)
    else:
        repos.users.set_password(settings.admin_email, settings.admin_password)


def seed_demo_accounts(repos: Repositories):
    if repos.users.get_by_email("va@demo.com") is None:
        repos.users.create("Demo VA", "va@demo.com", "vademo", role="va",
                           status="approved", user_id=DEMO_VA_ID)
        repos.va_profiles.create(
            DEMO_VA_ID, profile_id="va-prof-demo",
            headline="Expert Virtual Assistant",
            bio="I am a demo VA profile with extensive experience in administrative tasks.",
            hourly_rate=15, monthly_salary=2400, id_proof_score=80,
            education="Bachelors degree", last_active="Today"
        )
    else:
        repos.users.set_password("va@demo.com", "vademo")

    if repos.users.get_by_email("emp@demo.com") is None:
        repos.users.create("Demo Employer", "emp@demo.com", "empdemo", role="employer",
                           status="approved", user_id=DEMO_EMPLOYER_ID)
        repos.employer_profiles.create(
            DEMO_EMPLOYER_ID, profile_id="emp-prof-demo",
            company_name="Demo Corp", industry="Technology"
        )
    else:
        repos.users.set_password("emp@demo.com", "empdemo")


def seed_demo_vas(repos: Repositories):
    # Only when the table holds nothing beyond the demo account
    if repos.users.count_by_role("va") > 2:
        return
    for va in DEMO_VAS:
        email = "".join(va["name"].lower().split()) + "@demo.com"
        user_id = repos.users.create(va["name"], email, "demo", role="va", status="approved")
        repos.va_profiles.create(
            user_id,
            headline=va["headline"], bio=va["bio"],
            hourly_rate=va["hourly"], monthly_salary=va["monthly"],
            id_proof_score=va["id_proof"], education=va["education"],
            last_active="Today", availability=FULL_TIME
        )
        repos.va_profiles.add_skills(
            user_id, [{"skill_name": name, "years_experience": exp} for name, exp in va["skills"]]
        )
    logger.info("Seeded %d demo VAs", len(DEMO_VAS))


def seed_demo_jobs(repos: Repositories):
    if repos.jobs.count() > 1:
        return
    for job_id, title, description, salary_min, salary_max, job_type, featured in DEMO_JOBS:
        repos.jobs.create(
            DEMO_EMPLOYER_ID, title, description,
            salary_min=salary_min, salary_max=salary_max, job_type=job_type,
            experience_level="Intermediate", status="approved",
            is_featured=featured, job_id=job_id
        )
    for job_id, skills in DEMO_JOB_SKILLS.items():
        repos.jobs.add_skills(job_id, skills)
    logger.info("Seeded %d demo jobs", len(DEMO_JOBS))


def seed_database(database: Database, settings: Settings):
    """Seed plans and the admin always; demo content only when enabled."""
    with database.session() as db:
        repos = Repositories(db)
        seed_plans(repos)
        seed_admin(repos, settings)
        if settings.seed_demo_data:
            seed_demo_accounts(repos)
            seed_demo_vas(repos)
            seed_demo_jobs(repos)
    logger.info("Database initialized successfully.")
