from datetime import date

from django.core.management.base import BaseCommand
from django.db import transaction

from companies.models import Company
from docgen.content import default_sections
from mom.models import Approver
from mom.services import create_mom


class Command(BaseCommand):
    help = "Crée une entreprise et une MOM de démonstration (sections par défaut, approvers, next actions)."

    def add_arguments(self, parser):
        parser.add_argument("--company", type=str, default="PT Mitra Demo", help="Nom de l'entreprise")
        parser.add_argument("--title", type=str, default="Kick-off Kerja Sama", help="Titre de la MOM")

    @transaction.atomic
    def handle(self, *args, **opts):
        company_name = str(opts["company"]).strip()
        title = str(opts["title"]).strip()

        company, created = Company.objects.get_or_create(name=company_name)
        if created:
            self.stdout.write(self.style.NOTICE(f"Entreprise '{company_name}' créée"))

        sections = default_sections()
        sections[0]["content"] = {
            "type": "doc",
            "content": [
                {
                    "type": "paragraph",
                    "content": [{"type": "text", "text": f"Rencontre de lancement avec {company_name}."}],
                }
            ],
        }

        mom = create_mom(
            {
                "company": company,
                "title": title,
                "date": date.today(),
                "time": "09:00 - 11:00",
                "venue": "Ruang Rapat Utama",
                "count_attendees": "Tim Bisnis, Tim Teknik",
                "content": sections,
                "approvers": [
                    {"name": "Direktur Bisnis", "email": "", "type": Approver.TYPE_INTERNAL},
                    {"name": f"Direktur {company_name}", "email": "", "type": Approver.TYPE_EXTERNAL},
                ],
                "next_actions": [
                    {"action": "Kirim draft NDA", "target": "2 minggu", "pic": "Legal"},
                ],
                "is_finish": False,
            }
        )
        self.stdout.write(self.style.SUCCESS(f"MOM {mom.pk} '{title}' créée pour '{company_name}'"))
