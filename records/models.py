import secrets
from datetime import timedelta

from django.conf import settings
from django.db import models
from django.db.models import F
from django.utils import timezone

from pets.models import Pet
from triage.models import SymptomCheck


def generate_share_token() -> str:
    # 32 octets aléatoires -> 64 caractères hexadécimaux
    return secrets.token_hex(32)


class SharedRecord(models.Model):
    share_token = models.CharField(max_length=64, unique=True, editable=False)
    pet = models.ForeignKey(Pet, on_delete=models.CASCADE, related_name="shared_records")
    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="shared_records")
    checks = models.ManyToManyField(SymptomCheck, blank=True, related_name="shared_records")

    care_notes = models.TextField(blank=True)
    vet_name = models.CharField(max_length=120, blank=True)
    vet_email = models.EmailField(blank=True)

    view_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    expires_at = models.DateTimeField()

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["owner", "created_at"], name="records_owner_created_idx"),
            models.Index(fields=["expires_at"], name="records_expires_idx"),
        ]

    def save(self, *args, **kwargs):
        if not self.share_token:
            self.share_token = generate_share_token()
        if self.expires_at is None:
            self.expires_at = timezone.now() + timedelta(days=settings.SHARE_LINK_TTL_DAYS)
        super().save(*args, **kwargs)

    def is_expired(self, now=None):
        return (now or timezone.now()) > self.expires_at

    def register_view(self):
        # incrément côté base : deux consultations simultanées comptent bien deux fois
        SharedRecord.objects.filter(pk=self.pk).update(view_count=F("view_count") + 1)
        self.refresh_from_db(fields=["view_count"])
        return self.view_count

    @property
    def share_url(self):
        base = (settings.FRONTEND_BASE_URL or "").rstrip("/")
        return f"{base}/shared/{self.share_token}"

    def __str__(self):
        return f"Partage {self.pet.name} (expire {self.expires_at:%Y-%m-%d})"
