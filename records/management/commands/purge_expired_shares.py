from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from records.models import SharedRecord

# supprime uniquement les liens expirés : animaux et analyses restent intacts


class Command(BaseCommand):
    help = "Supprime les liens de partage expirés."

    def add_arguments(self, parser):
        parser.add_argument("--dry-run", action="store_true", help="Affiche le nombre sans supprimer.")

    def handle(self, *args, **options):
        qs = SharedRecord.objects.filter(expires_at__lt=timezone.now())
        count = qs.count()
        if options["dry_run"]:
            self.stdout.write(f"{count} lien(s) expiré(s) à supprimer.")
            return

        with transaction.atomic():
            qs.delete()
        self.stdout.write(self.style.SUCCESS(f"Purge terminée. Liens supprimés: {count}"))
