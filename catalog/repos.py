"""
Read-only access to the flashcard catalog.

A user may study a set they own or any public set.
"""
from django.db.models import Q

from .models import Flashcard, FlashcardSet


def accessible_sets(user_id):
    return FlashcardSet.objects.filter(
        Q(owner_id=user_id) | Q(visibility=FlashcardSet.Visibility.PUBLIC)
    )


def accessible_set_ids(user_id):
    return list(accessible_sets(user_id).values_list("id", flat=True))


def get_accessible_set(user_id, set_id):
    return accessible_sets(user_id).filter(pk=set_id).first()


def get_accessible_card(user_id, card_id):
    return (Flashcard.objects
            .select_related("flashcard_set")
            .filter(pk=card_id, flashcard_set__in=accessible_sets(user_id))
            .first())


def cards_by_id(card_ids):
    return Flashcard.objects.in_bulk(list(card_ids))
