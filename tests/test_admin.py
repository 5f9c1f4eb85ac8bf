# tests/test_admin.py
"""
Admin panel tests: access control, form saves and deletes.
"""
import pytest
from httpx import AsyncClient

from portfolio.models import ProfileRequest, ProjectRequest
from portfolio.services import ProfileService
from portfolio.services.content import experience_service, project_service


@pytest.mark.asyncio
class TestAdminAccess:

    @pytest.mark.parametrize("path", [
        "/admin",
        "/admin/dashboard",
        "/admin/profile",
        "/admin/experiences",
        "/admin/skills/new",
    ])
    async def test_unauthenticated_redirects_to_401_page(self, test_client: AsyncClient, path):
        response = await test_client.get(path)

        assert response.status_code == 303
        assert response.headers["location"] == "/page401"

    async def test_unauthenticated_post_redirects(self, test_client: AsyncClient):
        response = await test_client.post("/admin/projects", data={"title": "Sneaky"})

        assert response.status_code == 303
        assert response.headers["location"] == "/page401"

    async def test_page401(self, test_client: AsyncClient):
        response = await test_client.get("/page401")

        assert response.status_code == 401
        assert "text/html" in response.headers["content-type"]

    async def test_admin_root_redirects_to_dashboard(self, authenticated_client: AsyncClient):
        response = await authenticated_client.get("/admin")

        assert response.status_code == 303
        assert response.headers["location"] == "/admin/dashboard"

    async def test_dashboard_renders(self, authenticated_client: AsyncClient, test_user):
        response = await authenticated_client.get("/admin/dashboard")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]


@pytest.mark.asyncio
class TestAdminProfile:

    async def test_create_profile_from_form(self, authenticated_client: AsyncClient, test_db):
        response = await authenticated_client.post(
            "/admin/profile",
            data={"id": "0", "name": "Jane Doe", "email": "jane@example.com", "title": "Designer"}
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/admin/dashboard?success=profile"
        profile = await ProfileService(test_db).get_profile()
        assert profile.name == "Jane Doe"
        assert profile.title == "Designer"

    async def test_update_keeps_existing_photo(self, authenticated_client: AsyncClient, test_db):
        created = await ProfileService(test_db).create(
            ProfileRequest(name="Jane", email="jane@example.com", photo_url="/public/me.png")
        )

        response = await authenticated_client.post(
            "/admin/profile",
            data={
                "id": str(created.id),
                "name": "Jane Updated",
                "email": "jane@example.com",
                "existing_photo": "/public/me.png",
            }
        )

        assert response.status_code == 303
        profile = await ProfileService(test_db).get_profile()
        assert profile.name == "Jane Updated"
        assert profile.photo_url == "/public/me.png"

    async def test_invalid_profile_rerenders_form(self, authenticated_client: AsyncClient, test_db):
        response = await authenticated_client.post(
            "/admin/profile",
            data={"id": "0", "name": "", "email": "jane@example.com"}
        )

        assert response.status_code == 400
        assert "name is required" in response.text
        assert await ProfileService(test_db).get_profile_or_none() is None

    async def test_update_missing_profile_redirects(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(
            "/admin/profile",
            data={"id": "77", "name": "Jane", "email": "jane@example.com"}
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/admin/dashboard?error=profile"

        dashboard = await authenticated_client.get(response.headers["location"])
        assert "That profile no longer exists." in dashboard.text


@pytest.mark.asyncio
class TestAdminEntities:

    async def test_new_form_renders(self, authenticated_client: AsyncClient):
        response = await authenticated_client.get("/admin/experiences/new")

        assert response.status_code == 200
        assert "competition" in response.text

    async def test_save_experience(self, authenticated_client: AsyncClient, test_db):
        response = await authenticated_client.post(
            "/admin/experiences",
            data={"id": "", "title": "Engineer", "organization": "Acme", "type": "internship"}
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/admin/experiences?success=saved"

        items = await experience_service(test_db).get_all()
        assert len(items) == 1
        assert items[0].color == "pink"

        listing = await authenticated_client.get("/admin/experiences?success=saved")
        assert listing.status_code == 200
        assert "Engineer" in listing.text

    async def test_edit_and_update(self, authenticated_client: AsyncClient, test_db):
        service = experience_service(test_db)
        await authenticated_client.post(
            "/admin/experiences",
            data={"title": "Engineer", "organization": "Acme", "type": "work"}
        )
        experience = (await service.get_all())[0]

        edit = await authenticated_client.get(f"/admin/experiences/{experience.id}/edit")
        assert edit.status_code == 200
        assert "Acme" in edit.text

        response = await authenticated_client.post(
            "/admin/experiences",
            data={"id": str(experience.id), "title": "Lead", "organization": "Acme", "type": "work"}
        )
        assert response.status_code == 303
        assert (await service.get_by_id(experience.id)).title == "Lead"

    async def test_invalid_save_rerenders(self, authenticated_client: AsyncClient, test_db):
        response = await authenticated_client.post(
            "/admin/skills",
            data={"category": "Backend", "name": "Go", "level": "wizard"}
        )

        assert response.status_code == 400
        assert "level must be one of" in response.text

    async def test_publication_year_parsed(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(
            "/admin/publications",
            data={"title": "Paper", "year": "not a year"}
        )

        assert response.status_code == 400
        assert "year must be between 1900 and 2100" in response.text

    async def test_project_linked_to_profile(self, authenticated_client: AsyncClient, test_db):
        """Projects saved from the panel belong to the site profile"""
        profile = await ProfileService(test_db).create(ProfileRequest(name="Jane", email="jane@example.com"))

        response = await authenticated_client.post(
            "/admin/projects",
            data={"title": "Portfolio", "tech_stack": "Python, FastAPI"}
        )

        assert response.status_code == 303
        project = (await project_service(test_db).get_all())[0]
        assert project.profile_id == profile.id

    async def test_delete(self, authenticated_client: AsyncClient, test_db):
        service = experience_service(test_db)
        await authenticated_client.post(
            "/admin/experiences",
            data={"title": "Engineer", "organization": "Acme", "type": "work"}
        )
        experience = (await service.get_all())[0]

        response = await authenticated_client.post(f"/admin/experiences/{experience.id}/delete")

        assert response.status_code == 303
        assert response.headers["location"] == "/admin/experiences?success=deleted"
        assert await service.get_all() == []

    async def test_delete_invalid_id(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post("/admin/skills/0/delete")

        assert response.status_code == 303
        assert response.headers["location"] == "/admin/skills?error=delete"

    async def test_edit_missing_redirects_to_list(self, authenticated_client: AsyncClient):
        response = await authenticated_client.get("/admin/experiences/999/edit")

        assert response.status_code == 303
        assert response.headers["location"] == "/admin/experiences?error=notfound"

    async def test_update_missing_redirects_to_list(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(
            "/admin/experiences",
            data={"id": "999", "title": "Engineer", "organization": "Acme", "type": "work"}
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/admin/experiences?error=notfound"

    async def test_list_shows_error_notice(self, authenticated_client: AsyncClient):
        response = await authenticated_client.get("/admin/experiences?error=notfound")

        assert response.status_code == 200
        assert "That item no longer exists." in response.text


@pytest.mark.asyncio
class TestPublicPage:

    async def test_empty_site_renders(self, test_client: AsyncClient):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]

    async def test_site_shows_content(self, test_client: AsyncClient, test_db):
        await ProfileService(test_db).create(ProfileRequest(name="Jane <Doe>", email="jane@example.com"))
        await project_service(test_db).create(ProjectRequest(title="Portfolio", tech_stack="Python, FastAPI"))

        response = await test_client.get("/")

        assert response.status_code == 200
        # Content is HTML-escaped
        assert "Jane &lt;Doe&gt;" in response.text
        assert "Portfolio" in response.text
        assert "FastAPI" in response.text
