"""Tests for reading and saving content DNA (onboarding answers)."""
from content_hub.models.db_models import Onboarding
from content_hub.models.schemas import ContentDNA
from content_hub.services.content_dna_service import ContentDNAService


async def test_missing_row_reads_empty(db_session):
    dna = await ContentDNAService(db_session).get("user-1")
    assert dna == ContentDNA()


async def test_reads_question_columns(db_session):
    db_session.add(Onboarding(user_id="user-1", question1="CRM for dentists", question4="Witty", question5=None))
    await db_session.commit()

    dna = await ContentDNAService(db_session).get("user-1")

    assert dna.product_service == "CRM for dentists"
    assert dna.unique_style == "Witty"
    assert dna.post_platforms == ""


async def test_save_creates_then_updates(db_session):
    service = ContentDNAService(db_session)
    await service.save("user-1", ContentDNA(product_service="v1", ideal_customers="SMBs"))
    await service.save("user-1", ContentDNA(product_service="v2", ideal_customers="SMBs", post_platforms="LinkedIn"))

    dna = await service.get("user-1")
    assert dna.product_service == "v2"
    assert dna.post_platforms == "LinkedIn"
    assert (await service.get("user-2")) == ContentDNA()
