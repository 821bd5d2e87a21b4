"""
Demo content loaded into the store at startup.
"""
import logging
from typing import Optional

from core.auth import get_password_hash
from core.config import AppSettings
from core.models import (
    ArticleCreate,
    CourseCreate,
    EnrollmentCreate,
    InstructorCreate,
    PaymentMethod,
    TestimonialCreate,
    User,
    UserCreate,
    UserRole,
)
from core.storage import Storage

logger = logging.getLogger(__name__)

DEMO_USER_EMAIL = "demo@example.com"
DEMO_USER_PASSWORD = "password123"

INSTRUCTORS = [
    {
        "name": "Dr. Sarah Moyo",
        "title": "Digital Marketing Expert",
        "bio": "With over 15 years of experience in digital marketing and advertising, Dr. Moyo has helped over 200 Zimbabwean businesses grow their online presence. She holds a PhD in Digital Communications and has worked with major international brands.",
        "expertise": "Digital Marketing, SEO, Social Media Strategy",
        "photo": "",
    },
    {
        "name": "Michael Chikwanha",
        "title": "Senior Software Engineer",
        "bio": "Michael is a full-stack developer with 10+ years of experience at top tech companies including Google and Microsoft. He's passionate about making coding accessible to African developers and has mentored over 500 students.",
        "expertise": "Web Development, JavaScript, Python, AI",
        "photo": "",
    },
]

# "instructor" is an index into INSTRUCTORS
COURSES = [
    {
        "title": "Digital Marketing Basics",
        "description": "Master the fundamentals of digital marketing including social media, email marketing, and content strategy. Perfect for beginners looking to grow their business online.",
        "category": "Digital Marketing",
        "price_usd": "49.00",
        "price_zwl": "16000.00",
        "duration": "6 weeks",
        "level": "Beginner",
        "syllabus": "Week 1: Introduction to Digital Marketing\nWeek 2: Social Media Marketing Fundamentals\nWeek 3: Content Marketing Strategy\nWeek 4: Email Marketing Essentials\nWeek 5: Analytics and Measurement\nWeek 6: Campaign Planning and Execution",
        "learning_outcomes": "Create effective social media campaigns\nBuild an email marketing strategy\nUnderstand digital marketing analytics\nDevelop a content marketing plan\nMeasure and optimize campaign performance",
        "instructor": 0,
        "featured": True,
    },
    {
        "title": "Facebook & Google Ads Mastery",
        "description": "Learn to create high-converting Facebook and Google ad campaigns that drive real results. Master targeting, bidding strategies, and optimization techniques.",
        "category": "Digital Marketing",
        "price_usd": "79.00",
        "price_zwl": "25800.00",
        "duration": "8 weeks",
        "level": "Intermediate",
        "syllabus": "Week 1: Facebook Ads Manager Setup\nWeek 2: Audience Targeting and Segmentation\nWeek 3: Ad Creative Best Practices\nWeek 4: Campaign Optimization\nWeek 5: Google Ads Fundamentals\nWeek 6: Search vs Display Advertising\nWeek 7: Conversion Tracking\nWeek 8: Advanced Strategies and Scaling",
        "learning_outcomes": "Set up and manage Facebook ad campaigns\nCreate compelling ad copy and visuals\nMaster audience targeting\nOptimize campaigns for conversions\nTrack and measure ROI\nScale profitable campaigns",
        "instructor": 0,
        "featured": True,
    },
    {
        "title": "SEO Mastery",
        "description": "Dominate search engine rankings with comprehensive SEO training. Learn on-page, off-page, and technical SEO strategies that work in 2026.",
        "category": "SEO",
        "price_usd": "99.00",
        "price_zwl": "32400.00",
        "duration": "10 weeks",
        "level": "Intermediate",
        "syllabus": "Week 1: SEO Fundamentals\nWeek 2: Keyword Research Mastery\nWeek 3: On-Page Optimization\nWeek 4: Technical SEO\nWeek 5: Link Building Strategies\nWeek 6: Content SEO\nWeek 7: Local SEO\nWeek 8: SEO Tools and Analytics\nWeek 9: Algorithm Updates\nWeek 10: Advanced SEO Strategies",
        "learning_outcomes": "Conduct effective keyword research\nOptimize website content for search engines\nBuild high-quality backlinks\nImprove website technical performance\nRank higher in search results\nTrack and measure SEO success",
        "instructor": 0,
        "featured": False,
    },
    {
        "title": "Content Monetization",
        "description": "Turn your content into income streams. Learn affiliate marketing, sponsored content, digital products, and more ways to monetize your online presence.",
        "category": "Digital Marketing",
        "price_usd": "59.00",
        "price_zwl": "19300.00",
        "duration": "6 weeks",
        "level": "Beginner",
        "syllabus": "Week 1: Monetization Fundamentals\nWeek 2: Affiliate Marketing\nWeek 3: Sponsored Content\nWeek 4: Digital Product Creation\nWeek 5: Membership and Subscriptions\nWeek 6: Scaling Your Income",
        "learning_outcomes": "Set up affiliate marketing programs\nNegotiate sponsored content deals\nCreate and sell digital products\nBuild membership sites\nDiversify income streams",
        "instructor": 0,
        "featured": False,
    },
    {
        "title": "No-Code Development",
        "description": "Build professional websites and apps without writing code. Master tools like Webflow, Bubble, and Airtable to bring your ideas to life.",
        "category": "Coding",
        "price_usd": "89.00",
        "price_zwl": "29100.00",
        "duration": "8 weeks",
        "level": "Beginner",
        "syllabus": "Week 1: No-Code Revolution\nWeek 2: Website Building with Webflow\nWeek 3: App Development with Bubble\nWeek 4: Database Design with Airtable\nWeek 5: Automation with Zapier\nWeek 6: E-commerce Setup\nWeek 7: User Authentication\nWeek 8: Launching Your Project",
        "learning_outcomes": "Build responsive websites without code\nCreate functional web applications\nSet up automated workflows\nDesign databases\nLaunch complete projects",
        "instructor": 1,
        "featured": True,
    },
    {
        "title": "AI for Business",
        "description": "Leverage artificial intelligence to transform your business. Learn ChatGPT, automation, and AI tools that boost productivity and profits.",
        "category": "AI",
        "price_usd": "79.00",
        "price_zwl": "25800.00",
        "duration": "7 weeks",
        "level": "Beginner",
        "syllabus": "Week 1: AI Fundamentals for Business\nWeek 2: ChatGPT Mastery\nWeek 3: AI Content Creation\nWeek 4: AI Marketing Tools\nWeek 5: Automation with AI\nWeek 6: AI Analytics\nWeek 7: Implementing AI Strategy",
        "learning_outcomes": "Use ChatGPT effectively for business\nAutomate repetitive tasks with AI\nCreate content faster with AI tools\nMake data-driven decisions\nDevelop an AI implementation strategy",
        "instructor": 1,
        "featured": True,
    },
    {
        "title": "Web Development Essentials",
        "description": "Start your coding journey with HTML, CSS, and JavaScript. Build real websites and learn the foundations of professional web development.",
        "category": "Coding",
        "price_usd": "129.00",
        "price_zwl": "42200.00",
        "duration": "12 weeks",
        "level": "Beginner",
        "syllabus": "Week 1-2: HTML Fundamentals\nWeek 3-4: CSS Styling and Layout\nWeek 5-6: Responsive Design\nWeek 7-9: JavaScript Basics\nWeek 10: DOM Manipulation\nWeek 11: APIs and Fetch\nWeek 12: Final Project",
        "learning_outcomes": "Write clean HTML and CSS\nCreate responsive layouts\nUnderstand JavaScript fundamentals\nManipulate the DOM\nFetch data from APIs\nBuild complete websites",
        "instructor": 1,
        "featured": True,
    },
    {
        "title": "Freelancing & Remote Work",
        "description": "Build a successful freelance career. Learn how to find clients, set rates, manage projects, and work remotely for international companies.",
        "category": "Freelancing",
        "price_usd": "39.00",
        "price_zwl": "12700.00",
        "duration": "4 weeks",
        "level": "Beginner",
        "syllabus": "Week 1: Freelancing Fundamentals\nWeek 2: Finding and Landing Clients\nWeek 3: Pricing and Proposals\nWeek 4: Managing Projects and Scaling",
        "learning_outcomes": "Create a winning portfolio\nFind high-paying clients\nWrite persuasive proposals\nSet profitable rates\nManage client relationships\nScale your freelance business",
        "instructor": 0,
        "featured": False,
    },
    {
        "title": "E-commerce Mastery",
        "description": "Launch and grow a profitable online store. Learn product selection, store setup, marketing, and fulfillment strategies.",
        "category": "E-commerce",
        "price_usd": "89.00",
        "price_zwl": "29100.00",
        "duration": "8 weeks",
        "level": "Intermediate",
        "syllabus": "Week 1: E-commerce Fundamentals\nWeek 2: Product Research and Selection\nWeek 3: Store Setup (Shopify)\nWeek 4: Product Photography and Listings\nWeek 5: Marketing Your Store\nWeek 6: Customer Service\nWeek 7: Fulfillment and Logistics\nWeek 8: Scaling Your Business",
        "learning_outcomes": "Find profitable products to sell\nSet up a professional online store\nCreate compelling product listings\nDrive traffic to your store\nManage orders and fulfillment\nScale to 6-figure revenue",
        "instructor": 0,
        "featured": False,
    },
    {
        "title": "WhatsApp Business Automation",
        "description": "Automate your WhatsApp business communication. Learn chatbots, broadcast messaging, and customer management strategies.",
        "category": "Digital Marketing",
        "price_usd": "69.00",
        "price_zwl": "22600.00",
        "duration": "5 weeks",
        "level": "Intermediate",
        "syllabus": "Week 1: WhatsApp Business Basics\nWeek 2: Setting Up Automation\nWeek 3: Chatbot Development\nWeek 4: Broadcast Strategies\nWeek 5: Integration and Analytics",
        "learning_outcomes": "Set up WhatsApp Business API\nCreate automated responses\nBuild chatbots\nManage customer conversations at scale\nIntegrate with CRM systems",
        "instructor": 1,
        "featured": True,
    },
]

TESTIMONIALS = [
    {
        "name": "Tendai Mukono",
        "text": "The Digital Marketing course transformed my career! I went from struggling to find clients to running a successful agency with 15 clients. The practical strategies actually work in Zimbabwe.",
        "rating": 5,
        "course_completed": "Digital Marketing Basics",
        "achievement": "Now running a 6-figure marketing agency",
    },
    {
        "name": "Grace Sibanda",
        "text": "Best investment I ever made! The SEO course helped me rank my business on Google's first page. We've seen a 300% increase in organic traffic and sales have tripled.",
        "rating": 5,
        "course_completed": "SEO Mastery",
        "achievement": "Tripled business revenue in 6 months",
    },
    {
        "name": "James Nyathi",
        "text": "I was skeptical about learning to code, but the Web Development course made it so easy. Now I'm building websites for clients and earning in USD!",
        "rating": 5,
        "course_completed": "Web Development Essentials",
        "achievement": "Earning $2000/month as a freelance developer",
    },
    {
        "name": "Rutendo Mpofu",
        "text": "The AI for Business course opened my eyes to so many opportunities. I've automated 70% of my content creation and cut costs by half while doubling output.",
        "rating": 5,
        "course_completed": "AI for Business",
        "achievement": "Automated content creation, saved 20+ hours/week",
    },
    {
        "name": "Tafadzwa Moyo",
        "text": "Thanks to the Facebook Ads course, my e-commerce store is now profitable. I'm getting a 4x return on ad spend and growing every month.",
        "rating": 5,
        "course_completed": "Facebook & Google Ads Mastery",
        "achievement": "4x ROAS on Facebook ads",
    },
    {
        "name": "Chipo Banda",
        "text": "The Freelancing course gave me the confidence to quit my job and go full-time. I'm now working remotely for US clients and earning 3x my old salary.",
        "rating": 5,
        "course_completed": "Freelancing & Remote Work",
        "achievement": "Working remotely for international clients, 3x income",
    },
    {
        "name": "Simba Dube",
        "text": "E-commerce Mastery helped me launch my online store. Within 3 months, I hit $10,000 in sales. The step-by-step guidance was invaluable.",
        "rating": 5,
        "course_completed": "E-commerce Mastery",
        "achievement": "$10,000 in first quarter sales",
    },
    {
        "name": "Pamela Ncube",
        "text": "Content Monetization changed everything! I went from blogging for free to earning $1,500/month through affiliates and sponsored posts.",
        "rating": 5,
        "course_completed": "Content Monetization",
        "achievement": "$1,500/month passive income",
    },
    {
        "name": "Tinashe Khumalo",
        "text": "The instructors are incredibly supportive. No-Code Development gave me the tools to build my startup idea without hiring developers. We just got our first 100 users!",
        "rating": 5,
        "course_completed": "No-Code Development",
        "achievement": "Launched startup, 100+ active users",
    },
    {
        "name": "Fungai Chirwa",
        "text": "WhatsApp Automation has been a game-changer for my business. I can now handle 200+ customer conversations daily without hiring extra staff.",
        "rating": 5,
        "course_completed": "WhatsApp Business Automation",
        "achievement": "Automated customer service, 200+ daily conversations",
    },
]

ARTICLES = [
    {
        "title": "Top 10 Digital Marketing Trends in Zimbabwe for 2026",
        "slug": "top-10-digital-marketing-trends-zimbabwe-2026",
        "content": "As Zimbabwe's digital landscape continues to evolve, businesses must stay ahead of emerging trends to remain competitive. Here are the top 10 digital marketing trends shaping 2026...",
        "excerpt": "Discover the latest digital marketing trends dominating Zimbabwe's business landscape in 2026.",
        "category": "Digital Marketing",
        "author": "Dr. Sarah Moyo",
    },
    {
        "title": "How I Built a Six-Figure Freelance Career from Harare",
        "slug": "six-figure-freelance-career-harare",
        "content": "Three years ago, I was working a traditional 9-5 job earning $400 per month. Today, I run a thriving freelance business earning over $8,000 monthly, all from my home in Harare...",
        "excerpt": "A success story of building a profitable freelance career while living in Zimbabwe.",
        "category": "Success Stories",
        "author": "James Nyathi",
    },
    {
        "title": "SEO Strategies That Actually Work for Zimbabwean Businesses",
        "slug": "seo-strategies-zimbabwean-businesses",
        "content": "Many Zimbabwean businesses struggle with SEO because they follow generic advice meant for Western markets. Here are SEO strategies specifically tailored for our local context...",
        "excerpt": "Proven SEO tactics designed specifically for the Zimbabwean market.",
        "category": "SEO",
        "author": "Dr. Sarah Moyo",
    },
    {
        "title": "5 AI Tools Every Zimbabwean Entrepreneur Should Use in 2026",
        "slug": "ai-tools-zimbabwean-entrepreneurs-2026",
        "content": "Artificial intelligence is no longer just for big tech companies. Here are 5 AI tools that Zimbabwean entrepreneurs can use today to boost productivity and grow their businesses...",
        "excerpt": "Essential AI tools to supercharge your business productivity and growth.",
        "category": "AI & Technology",
        "author": "Michael Chikwanha",
    },
    {
        "title": "From Zero to Earning in USD: A Remote Work Guide for Zimbabweans",
        "slug": "remote-work-guide-zimbabweans",
        "content": "The remote work revolution has opened unprecedented opportunities for Zimbabweans to earn in foreign currency. This comprehensive guide will show you exactly how to get started...",
        "excerpt": "Your complete roadmap to landing remote jobs and earning in USD from Zimbabwe.",
        "category": "Career Advice",
        "author": "Chipo Banda",
    },
]


def seed_admin(storage: Storage, settings: AppSettings) -> Optional[User]:
    """Creates the admin account from ADMIN_EMAIL / ADMIN_PASSWORD if both are set."""
    if not settings.admin_email or not settings.admin_password:
        return None
    existing = storage.get_user_by_email(settings.admin_email)
    if existing:
        return existing
    admin = storage.create_user(
        UserCreate(
            name="Administrator",
            email=settings.admin_email,
            password=get_password_hash(settings.admin_password),
            role=UserRole.admin,
        )
    )
    logger.info(f"👤 Admin account seeded: {admin.email}")
    return admin


def seed_storage(storage: Storage, settings: Optional[AppSettings] = None) -> None:
    settings = settings or AppSettings()

    instructors = [storage.create_instructor(InstructorCreate(**data)) for data in INSTRUCTORS]

    courses = []
    for data in COURSES:
        data = dict(data)
        instructor = instructors[data.pop("instructor")]
        courses.append(
            storage.create_course(CourseCreate(**data, thumbnail="", instructor_id=instructor.id))
        )

    for data in TESTIMONIALS:
        storage.create_testimonial(TestimonialCreate(**data, photo=""))

    for data in ARTICLES:
        storage.create_article(ArticleCreate(**data, thumbnail=""))

    demo_user = storage.create_user(
        UserCreate(
            name="Demo Student",
            email=DEMO_USER_EMAIL,
            phone="+263771234567",
            password=get_password_hash(DEMO_USER_PASSWORD),
            role=UserRole.student,
        )
    )
    storage.create_enrollment(
        EnrollmentCreate(
            user_id=demo_user.id,
            course_id=courses[0].id,
            payment_method=PaymentMethod.ecocash.value,
        )
    )

    seed_admin(storage, settings)

    summary = ", ".join(f"{count} {name}" for name, count in storage.counts().items())
    logger.info(f"✅ Seed data loaded - {summary}")
