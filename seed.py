"""Seed the question bank and demo account.

Run standalone with ``python seed.py`` or let the API call
``initialize_database`` on startup. Every step is guarded by an existence
check, so repeated runs leave existing data untouched.
"""

import asyncio

from auth import get_password_hash_async
from database import check_db_connection, create_client, get_database, init_db
from db_models import COLLECTIONS, USERS, user_document
from db_operations import count_questions, count_users, insert_questions
from logger import log_info, log_error
from metrics import seed_duration, track_time
from models import Question, SeedResult

DEMO_USER_NAME = "John Doe"
DEMO_USER_EMAIL = "john@example.com"
DEMO_USER_PASSWORD = "password123"


SAMPLE_QUESTIONS = {
    "technical": [
        Question("What is the difference between let, const, and var in JavaScript?", "technical", "medium", ["javascript", "programming"]),
        Question("Explain the concept of closures in JavaScript.", "technical", "hard", ["javascript", "programming"]),
        Question("How does the 'this' keyword work in JavaScript?", "technical", "medium", ["javascript", "programming"]),
        Question("What are promises in JavaScript and how do they work?", "technical", "medium", ["javascript", "programming", "async"]),
        Question("Explain the difference between synchronous and asynchronous code.", "technical", "medium", ["programming", "async"]),
        Question("What is the event loop in JavaScript?", "technical", "hard", ["javascript", "programming", "async"]),
        Question("Describe the difference between == and === in JavaScript.", "technical", "easy", ["javascript", "programming"]),
        Question("What is the DOM and how do you manipulate it?", "technical", "medium", ["javascript", "web", "dom"]),
        Question("Explain RESTful API architecture.", "technical", "medium", ["api", "web", "architecture"]),
        Question("What is CORS and how does it work?", "technical", "medium", ["web", "security"]),
    ],
    "behavioral": [
        Question("Tell me about a time when you had to solve a complex problem.", "behavioral", "medium", ["problem-solving", "general"]),
        Question("Describe a situation where you had to work under pressure to meet a deadline.", "behavioral", "medium", ["time-management", "stress"]),
        Question("Give an example of a time when you had to adapt to a significant change at work.", "behavioral", "medium", ["adaptability", "change-management"]),
        Question("Tell me about a time when you had a conflict with a team member and how you resolved it.", "behavioral", "medium", ["conflict-resolution", "teamwork"]),
        Question("Describe a project you're particularly proud of and your contribution to it.", "behavioral", "medium", ["achievement", "project-management"]),
        Question("How do you handle criticism of your work?", "behavioral", "medium", ["feedback", "self-improvement"]),
        Question("Tell me about a time when you failed at something and what you learned from it.", "behavioral", "medium", ["failure", "learning"]),
        Question("How do you prioritize tasks when you have multiple deadlines?", "behavioral", "medium", ["time-management", "prioritization"]),
        Question("Describe a situation where you had to learn a new skill quickly.", "behavioral", "medium", ["learning", "adaptability"]),
        Question("Tell me about a time when you went above and beyond what was required.", "behavioral", "medium", ["initiative", "work-ethic"]),
    ],
    "business": [
        Question("How would you approach entering a new market?", "business", "hard", ["strategy", "market-analysis"]),
        Question("Describe how you would analyze the performance of a marketing campaign.", "business", "medium", ["marketing", "analytics"]),
        Question("How would you handle a situation where a client is unhappy with your service?", "business", "medium", ["client-management", "conflict-resolution"]),
        Question("What metrics would you use to measure the success of a product launch?", "business", "medium", ["product-management", "analytics"]),
        Question("How would you approach pricing a new product?", "business", "hard", ["pricing", "strategy"]),
        Question("Describe your approach to managing a team through a company restructuring.", "business", "hard", ["management", "change-management"]),
        Question("How would you handle a situation where you need to cut costs without affecting quality?", "business", "hard", ["cost-management", "efficiency"]),
        Question("What strategies would you use to increase customer retention?", "business", "medium", ["customer-retention", "strategy"]),
        Question("How would you approach a negotiation with a key supplier?", "business", "medium", ["negotiation", "supplier-management"]),
        Question("Describe how you would create a five-year business plan.", "business", "hard", ["strategic-planning", "business-development"]),
    ],
    "healthcare": [
        Question("How would you handle a situation where a patient is dissatisfied with their care?", "healthcare", "medium", ["patient-care", "conflict-resolution"]),
        Question("Describe your approach to maintaining patient confidentiality.", "healthcare", "medium", ["ethics", "confidentiality"]),
        Question("How do you stay updated with the latest medical research and practices?", "healthcare", "medium", ["professional-development", "research"]),
        Question("Describe a situation where you had to make a quick decision in a patient's care.", "healthcare", "hard", ["decision-making", "critical-thinking"]),
        Question("How would you handle a disagreement with a colleague about a patient's treatment plan?", "healthcare", "medium", ["teamwork", "conflict-resolution"]),
        Question("What steps would you take to prevent medication errors?", "healthcare", "medium", ["patient-safety", "protocols"]),
        Question("How would you approach communicating bad news to a patient or their family?", "healthcare", "hard", ["communication", "empathy"]),
        Question("Describe your experience working in a multidisciplinary healthcare team.", "healthcare", "medium", ["teamwork", "collaboration"]),
        Question("How do you manage your time effectively in a fast-paced healthcare environment?", "healthcare", "medium", ["time-management", "stress-management"]),
        Question("What strategies would you use to promote patient compliance with treatment plans?", "healthcare", "medium", ["patient-education", "communication"]),
    ],
}


def all_questions() -> list:
    """Flatten the catalog into insertable documents."""
    return [question.to_dict() for questions in SAMPLE_QUESTIONS.values() for question in questions]


async def ensure_collections(db) -> list:
    """Create missing collections and return the names created."""
    existing = set(await db.list_collection_names())
    created = []
    for name in COLLECTIONS:
        if name not in existing:
            await db.create_collection(name)
            created.append(name)
    return created


@track_time(seed_duration)
async def initialize_database(db) -> SeedResult:
    """
    Populate an empty store with the question bank and a demo account.

    Failures propagate to the caller; a partially failed bulk insert is not
    rolled back.
    """
    result = SeedResult()

    result.collections_created = await ensure_collections(db)
    if result.collections_created:
        log_info(f"Collections created: {', '.join(result.collections_created)}")
    else:
        log_info("Collections already exist")

    try:
        await init_db(db)
    except Exception as e:
        # Fails when existing accounts share an email; seeding continues
        log_error(f"Index creation failed: {str(e)}")

    if await count_questions(db) == 0:
        log_info("Populating questions collection...")
        result.questions_inserted = await insert_questions(db, all_questions())
        log_info(f"{result.questions_inserted} questions inserted")
    else:
        log_info("Questions collection already populated")

    if await count_users(db) == 0:
        log_info("Creating sample user...")
        await db[USERS].insert_one(
            user_document(DEMO_USER_NAME, DEMO_USER_EMAIL, await get_password_hash_async(DEMO_USER_PASSWORD))
        )
        result.demo_user_created = True
        log_info("Sample user created", email=DEMO_USER_EMAIL)
    else:
        log_info("Users collection already has data")

    if result.is_noop():
        log_info("Nothing to seed")
    log_info("Database initialization complete")
    return result


async def run_seed(uri: str = None, db_name: str = None) -> SeedResult:
    """One-shot seed run with its own client. Errors are logged, not raised."""
    client = None
    try:
        client = create_client(uri)
        await check_db_connection(client)
        log_info("Connected to MongoDB")
        return await initialize_database(get_database(client, db_name))
    except Exception as e:
        log_error(f"Error initializing database: {str(e)}")
        return SeedResult()
    finally:
        if client is not None:
            await client.close()
            log_info("MongoDB connection closed")


if __name__ == "__main__":
    asyncio.run(run_seed())
