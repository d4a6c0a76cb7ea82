# vehicle_registry/db/seed.py
import asyncio
import logging
import random
import sys
from datetime import date, timedelta

from faker import Faker
from tqdm import tqdm

from vehicle_registry.db.session import connect_db_pool, get_pool, close_db_pool
from vehicle_registry.db.models.record_model import Gender
from vehicle_registry.repositories.record_repo import DuplicateValueError, RecordRepository

logger = logging.getLogger(__name__)

fake = Faker("ar_EG")

NUM_RECORDS = 50
MIN_AGE_YEARS = 18
MAX_AGE_YEARS = 75

PHONE_PREFIXES = ["010", "011", "012", "015"]
CAR_TYPES = ["Sedan", "Hatchback", "SUV", "Pickup", "Minivan", "Coupe", "Microbus"]


def generate_phone_number() -> str:
    number = random.choice(PHONE_PREFIXES) + "".join(str(random.randint(0, 9)) for _ in range(8))
    return random.choice(["", "+2"]) + number


def generate_car_number() -> str:
    length = random.randint(1, 8)
    return "".join(str(random.randint(0, 9)) for _ in range(length))


def generate_birth_date(today: date | None = None) -> date:
    today = today or date.today()
    age_days = random.randint(MIN_AGE_YEARS * 365, MAX_AGE_YEARS * 365)
    return today - timedelta(days=age_days)


def generate_record() -> dict:
    gender = random.choice(list(Gender))
    name = fake.name_male() if gender is Gender.MALE else fake.name_female()
    return {
        "username": name[:50],
        "phone_number": generate_phone_number(),
        "birth_date": generate_birth_date(),
        "gender": gender.value,
        "car_number": generate_car_number(),
        "car_type": random.choice(CAR_TYPES),
    }


async def seed(count: int = NUM_RECORDS):
    await connect_db_pool()
    pool = await get_pool()
    if pool is None:
        raise RuntimeError("Database pool could not be initialized")

    created = skipped = 0
    async with pool.acquire() as conn:
        repo = RecordRepository(conn)
        for _ in tqdm(range(count), desc="Seeding records"):
            try:
                await repo.create(generate_record())
                created += 1
            except DuplicateValueError as e:
                # random collision with an existing phone or car number
                logger.debug(f"Skipped duplicate {e.field}")
                skipped += 1

    logger.info(f"✅ Seed finished: {created} created, {skipped} skipped.")
    await close_db_pool()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed(int(sys.argv[1]) if len(sys.argv) > 1 else NUM_RECORDS))
