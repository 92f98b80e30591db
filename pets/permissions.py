from rest_framework import permissions


class IsPetOwner(permissions.BasePermission):
    """Objet rattaché à un animal (ou l'animal lui-même) appartenant à l'utilisateur."""

    def has_object_permission(self, request, view, obj):
        owner_id = getattr(obj, "owner_id", None)
        if owner_id is None and hasattr(obj, "pet"):
            owner_id = obj.pet.owner_id
        return owner_id == request.user.id
