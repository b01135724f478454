import os
import sys

# Add 'backend' folder to Python path
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from config import settings
from models.disc import Disc
from models.lesson import Lesson
from repositories.cart import CartFileRepository
from repositories.disc import DiscFileRepository
from repositories.lesson import LessonFileRepository
from repositories.user import UserFileRepository

# Configuration
SAMPLE_DISCS = [
    # color, weight, type, price, quantity
    ("Blue", 173, "Putter", 14.99, 12),
    ("Red", 175, "Driver", 17.99, 8),
    ("Yellow", 170, "Midrange", 15.49, 10),
    ("Orange", 168, "Fairway Driver", 16.99, 6),
    ("Pink", 160, "Putter", 12.99, 3),
]
SAMPLE_LESSONS = [
    # title, description, days, start, end, price
    ("Putting Basics", "Stance, grip and routine inside the circle", "MWF", "10/10/2022", "12/10/2022", 45.0),
    ("Backhand Form", "Reach back, pull through and follow through", "TuTh", "10/11/2022", "11/29/2022", 60.0),
    ("Weekend Course Play", "Play a full round with a coach", "SatSun", "10/15/2022", "12/18/2022", 80.0),
]
ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin")
# End Configuration

def load_all_data():
    """Seeds the configured data files with a sample catalogue."""
    discs = DiscFileRepository(settings.DISCS_FILE)
    lessons = LessonFileRepository(settings.LESSONS_FILE)
    users = UserFileRepository(settings.USERS_FILE)
    carts = CartFileRepository(settings.CARTS_FILE)

    if discs.get_all():
        print(f"{settings.DISCS_FILE} already holds discs, skipping.")
    else:
        for color, weight, disc_type, price, quantity in SAMPLE_DISCS:
            discs.create(Disc(0, color, weight, disc_type, price, quantity))
        print(f"Added {len(SAMPLE_DISCS)} discs.")

    if lessons.get_all():
        print(f"{settings.LESSONS_FILE} already holds lessons, skipping.")
    else:
        for title, description, days, start, end, price in SAMPLE_LESSONS:
            lessons.create(Lesson(0, None, title, description, days, start, end, price))
        print(f"Added {len(SAMPLE_LESSONS)} lessons.")

    # Every user gets a cart, the admin included
    if users.create(ADMIN_USERNAME, ADMIN_PASSWORD) is not None:
        print("Created admin account.")
    if carts.create(ADMIN_USERNAME) is not None:
        print("Created admin cart.")

    # Make sure the carts file exists even when nothing was added
    carts.save()


if __name__ == "__main__":
    load_all_data()
