import pytest
from django.urls import reverse
from rest_framework.test import APIClient

from companies.models import Company
from progress.models import Progress, STATUS_COMPLETED, STEP_MOM
from progress.services import delete_progress, status_label, sync_progress


@pytest.fixture
def company(db):
    return Company.objects.create(name="PT Mitra")


@pytest.mark.django_db
def test_sync_progress_draft_without_progress_creates_nothing(company):
    assert sync_progress(None, company, STEP_MOM, finished=False) is None
    assert Progress.objects.count() == 0


@pytest.mark.django_db
def test_sync_progress_finish_creates_completed_entry(company):
    progress = sync_progress(None, company, STEP_MOM, finished=True)
    assert progress.pk is not None
    assert progress.step.code == STEP_MOM
    assert progress.status.code == STATUS_COMPLETED
    assert status_label(progress) == "Completed"


@pytest.mark.django_db
def test_sync_progress_back_to_draft_keeps_entry(company):
    progress = sync_progress(None, company, STEP_MOM, finished=True)
    again = sync_progress(progress, company, STEP_MOM, finished=False)
    assert again.pk == progress.pk
    again.refresh_from_db()
    assert again.status is None
    assert status_label(again) == "Draft"

    finished = sync_progress(again, company, STEP_MOM, finished=True)
    assert finished.pk == progress.pk
    assert Progress.objects.count() == 1


@pytest.mark.django_db
def test_delete_progress_is_tolerant(company):
    progress = sync_progress(None, company, STEP_MOM, finished=True)
    delete_progress(progress.pk)
    delete_progress(progress.pk)
    delete_progress(None)
    assert Progress.objects.count() == 0


@pytest.mark.django_db
def test_steps_are_seeded_and_listed():
    r = APIClient().get(reverse("progress_steps"))
    assert r.status_code == 200
    assert [s["code"] for s in r.data] == ["mom", "jik", "nda", "msa", "mou"]


@pytest.mark.django_db
def test_progress_list_filters_by_company(company):
    other = Company.objects.create(name="CV Lain")
    sync_progress(None, company, STEP_MOM, finished=True)
    sync_progress(None, other, STEP_MOM, finished=True)

    r = APIClient().get(reverse("progress-list"), {"company": company.pk})
    assert r.status_code == 200
    assert len(r.data) == 1
    assert r.data[0]["company_id"] == company.pk
    assert r.data[0]["status"]["name"] == "Completed"
