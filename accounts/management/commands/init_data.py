import json
import os
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from accounts.models import User
from catalog.models import Flashcard, FlashcardSet

DEFAULT_PASSWORD = "testpassword"


class Command(BaseCommand):
    help = "Replace all users, flashcard sets and review progress with seed data"

    def add_arguments(self, parser):
        parser.add_argument(
            "--file", default="SEED_DATA.json", help="JSON file name to load data from"
        )

    def handle(self, *args, **options):
        file_name = options.get("file") or "SEED_DATA.json"
        # Only seed files shipped next to this command can be loaded
        if os.path.basename(file_name) != file_name or file_name in (".", ".."):
            raise CommandError(f"Seed file must be a bare file name, got {file_name!r}")
        json_file_path = os.path.join(os.path.dirname(__file__), file_name)

        try:
            with open(json_file_path) as json_file:
                data = json.load(json_file)
        except (OSError, ValueError) as e:
            raise CommandError(f"Error loading data from {file_name}: {e}") from e

        with transaction.atomic():
            # Cascades to sets, cards and review progress
            User.objects.all().delete()
            self.stdout.write(self.style.SUCCESS("All existing data has been deleted"))

            users = {}
            for entry in data.get("users", []):
                create = User.objects.create_superuser if entry.get("superuser") else User.objects.create_user
                users[entry["username"]] = create(
                    entry["username"],
                    email=entry.get("email", f"{entry['username']}@example.com"),
                    password=entry.get("password", DEFAULT_PASSWORD),
                )

            card_count = 0
            for entry in data.get("sets", []):
                owner = users.get(entry["owner"])
                if owner is None:
                    raise CommandError(f"Unknown owner {entry['owner']!r} for set {entry['title']!r}")
                flashcard_set = FlashcardSet.objects.create(
                    id=entry["id"],
                    owner=owner,
                    title=entry["title"],
                    description=entry.get("description", ""),
                    visibility=entry.get("visibility", FlashcardSet.Visibility.PRIVATE),
                )
                for card in entry.get("cards", []):
                    Flashcard.objects.create(
                        id=card["id"],
                        flashcard_set=flashcard_set,
                        question=card["question"],
                        answer=card["answer"],
                    )
                    card_count += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed data loaded successfully from {file_name}: "
                f"{len(users)} users, {len(data.get('sets', []))} sets, {card_count} cards"
            )
        )
