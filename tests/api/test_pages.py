"""
Tests for the server-rendered roster pages and their form submissions.
"""
import pytest

FORM_SUBMISSION = {
    "name": "Grace Hopper",
    "imageUrl": "",
    "location": "Arlington",
    "position": "Rear Admiral",
    "experienceYears": "40",
    "skills.communicative": "88",
    "skills.immaculate": "77",
    "skills.problemsolver": "99",
    "skills.timely": "66",
    "skills.tinker": "95",
    "skills.efficient": "80",
}


@pytest.mark.asyncio
async def test_root_redirects_to_list(client):
    response = await client.get("/")
    assert response.status_code == 307
    assert response.headers["location"] == "/devs"


@pytest.mark.asyncio
async def test_empty_list_page(client):
    response = await client.get("/devs")
    assert response.status_code == 200
    assert "Developers Dex" in response.text
    assert 'href="/devs/add"' in response.text


@pytest.mark.asyncio
async def test_add_form_has_default_ratings(client):
    response = await client.get("/devs/add")

    assert response.status_code == 200
    assert 'name="skills.timely"' in response.text
    assert 'value="55"' in response.text


@pytest.mark.asyncio
async def test_add_form_submission_creates_developer(client):
    response = await client.post("/devs/add", data=FORM_SUBMISSION)

    assert response.status_code == 303
    assert response.headers["location"] == "/devs"

    developers = (await client.get("/api/devs")).json()
    assert len(developers) == 1
    created = developers[0]
    assert created["name"] == "Grace Hopper"
    assert created["experienceYears"] == 40
    assert created["skills"]["problemsolver"] == 99
    assert created["imageUrl"] == "https://avatars.githubusercontent.com/u/45007745?v=4"

    page = await client.get("/devs")
    assert "Grace Hopper" in page.text
    assert f'href="/devs/{created["id"]}"' in page.text


@pytest.mark.asyncio
async def test_invalid_add_submission_rerenders_form(client):
    submission = {**FORM_SUBMISSION, "experienceYears": "-2", "name": "Grace Again"}

    response = await client.post("/devs/add", data=submission)

    assert response.status_code == 400
    assert 'value="Grace Again"' in response.text
    assert 'class="error"' in response.text
    assert (await client.get("/api/devs")).json() == []


@pytest.mark.asyncio
async def test_detail_page_renders_card_and_chart(client, developer_payload):
    created = (await client.post("/api/devs", json=developer_payload)).json()

    response = await client.get(f"/devs/{created['id']}")

    assert response.status_code == 200
    assert "Ada Lovelace" in response.text
    assert "7 years xp" in response.text
    assert "developer-radar" in response.text
    assert '"problemsolver"' in response.text


@pytest.mark.asyncio
async def test_detail_page_for_unknown_developer(client):
    response = await client.get("/devs/dev_missing")
    assert response.status_code == 404
    assert "Developer not found" in response.text


@pytest.mark.asyncio
async def test_edit_form_is_prefilled(client, developer_payload):
    created = (await client.post("/api/devs", json=developer_payload)).json()

    response = await client.get(f"/devs/{created['id']}/edit")

    assert response.status_code == 200
    assert f'name="id" value="{created["id"]}"' in response.text
    assert 'value="Ada Lovelace"' in response.text
    assert 'value="90"' in response.text


@pytest.mark.asyncio
async def test_edit_form_submission_updates_developer(client, developer_payload):
    created = (await client.post("/api/devs", json=developer_payload)).json()
    submission = {
        **FORM_SUBMISSION,
        "id": created["id"],
        "name": "Ada King",
        "imageUrl": created["imageUrl"],
    }

    response = await client.post(f"/devs/{created['id']}/edit", data=submission)

    assert response.status_code == 303
    stored = (await client.get(f"/api/devs/{created['id']}")).json()
    assert stored["name"] == "Ada King"
    assert stored["imageUrl"] == created["imageUrl"]
    assert stored["skills"]["tinker"] == 95


@pytest.mark.asyncio
async def test_edit_submission_for_unknown_developer(client):
    submission = {**FORM_SUBMISSION, "id": "dev_missing"}

    response = await client.post("/devs/dev_missing/edit", data=submission)

    assert response.status_code == 400
    assert "Developer not found" in response.text


@pytest.mark.asyncio
async def test_oversized_experience_submission_rerenders_form(client):
    submission = {**FORM_SUBMISSION, "experienceYears": "100000000000000000000"}

    response = await client.post("/devs/add", data=submission)

    assert response.status_code == 400
    assert 'class="error"' in response.text
    assert (await client.get("/api/devs")).json() == []
