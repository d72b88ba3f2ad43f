# SIXES/signals.py
import logging

from django.db.models.signals import post_save
from django.dispatch import receiver
from django.utils import timezone

from .models import Scores
from .services.scoring import all_holes_scored

logger = logging.getLogger(__name__)


@receiver(post_save, sender=Scores)
def maybe_complete_game(sender, instance, **kwargs):
    game = instance.GameID
    if not game.IsCompleted and all_holes_scored(game):
        game.IsCompleted = True
        game.CompletedAt = timezone.now()
        game.save(update_fields=["IsCompleted", "CompletedAt"])
        logger.info("game %s completed", game.id)
