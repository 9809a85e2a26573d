from django.db.models import Q

from .exceptions import InvalidIdentifier


def parse_identifier(raw) -> int:
    """Identifiant entier en chiffres ASCII, sinon InvalidIdentifier."""
    text = str(raw)
    if not (text.isascii() and text.isdigit()):
        raise InvalidIdentifier()
    return int(text)


class IntegerLookupMixin:
    """
    Les identifiants de documents sont des entiers:
    un id non numérique donne 400 (et non 404).
    """

    def get_object(self):
        lookup = self.lookup_url_kwarg or self.lookup_field
        parse_identifier(self.kwargs.get(lookup, ""))
        return super().get_object()


class SearchQueryMixin:
    """Filtre ?q= (contient, insensible a la casse) sur `search_fields`."""

    search_fields: tuple = ()

    def filter_queryset(self, queryset):
        queryset = super().filter_queryset(queryset)
        term = (self.request.query_params.get("q") or "").strip()
        if not term or not self.search_fields:
            return queryset
        cond = Q()
        for field in self.search_fields:
            cond |= Q(**{f"{field}__icontains": term})
        return queryset.filter(cond)
