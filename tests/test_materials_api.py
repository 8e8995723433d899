"""HTTP tests for material management."""
from edusystem.services import test_service

from conftest import make_questions

MATERIALS_URL = "/api/v1/materials"

MATERIAL_PAYLOAD = {
    "text": "Introduction to thermodynamics",
    "media_files": ["https://example.com/slides.pdf"],
    "category": "Science",
}


class TestCreateMaterial:
    def test_tutor_creates_material(self, client, tutor, tutor_headers):
        response = client.post(MATERIALS_URL, json=MATERIAL_PAYLOAD, headers=tutor_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["user_id"] == tutor.id
        assert data["category"] == "Science"
        assert data["content"]["text"] == MATERIAL_PAYLOAD["text"]
        assert data["content"]["media_files"] == MATERIAL_PAYLOAD["media_files"]

    def test_student_cannot_create_material(self, client, student_headers):
        assert client.post(MATERIALS_URL, json=MATERIAL_PAYLOAD, headers=student_headers).status_code == 403

    def test_unknown_category_returns_422(self, client, tutor_headers):
        payload = dict(MATERIAL_PAYLOAD, category="Cooking")

        assert client.post(MATERIALS_URL, json=payload, headers=tutor_headers).status_code == 422

    def test_blank_text_returns_400(self, client, tutor_headers):
        payload = dict(MATERIAL_PAYLOAD, text="   ")

        assert client.post(MATERIALS_URL, json=payload, headers=tutor_headers).status_code == 400


class TestReadMaterials:
    def test_list_and_get(self, client, material):
        listed = client.get(MATERIALS_URL)
        fetched = client.get(f"{MATERIALS_URL}/{material.id}")

        assert listed.status_code == 200
        assert [item["id"] for item in listed.json()] == [material.id]
        assert fetched.json()["content"]["text"] == material.content.text

    def test_unknown_material_returns_404(self, client):
        assert client.get(f"{MATERIALS_URL}/9999").status_code == 404

    def test_materials_by_user(self, client, tutor, tutor_headers, student, student_headers, material):
        own = client.get(f"{MATERIALS_URL}/user/{tutor.id}", headers=tutor_headers)
        other = client.get(f"{MATERIALS_URL}/user/{tutor.id}", headers=student_headers)
        self_view = client.get(f"{MATERIALS_URL}/user/{student.id}", headers=student_headers)

        assert [item["id"] for item in own.json()] == [material.id]
        assert other.status_code == 403
        assert self_view.json() == []


class TestUpdateMaterial:
    def test_partial_update_keeps_other_fields(self, client, tutor_headers, material):
        response = client.put(
            f"{MATERIALS_URL}/{material.id}/content",
            json={"text": "Revised text"},
            headers=tutor_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["content"]["text"] == "Revised text"
        assert data["content"]["media_files"] == ["https://example.com/video.mp4"]
        assert data["category"] == "Science"

    def test_update_category(self, client, admin_headers, material):
        response = client.put(
            f"{MATERIALS_URL}/{material.id}/content",
            json={"category": "Health"},
            headers=admin_headers,
        )

        assert response.json()["category"] == "Health"

    def test_student_cannot_update(self, client, student_headers, material):
        response = client.put(
            f"{MATERIALS_URL}/{material.id}/content",
            json={"text": "Hijacked"},
            headers=student_headers,
        )

        assert response.status_code == 403


class TestDeleteMaterial:
    def test_delete_cascades_test(self, client, db_session, tutor, tutor_headers, material):
        service = test_service.TestService(db_session)
        test = service.create_test(material.id, make_questions(3), tutor.id)

        response = client.delete(f"{MATERIALS_URL}/{material.id}", headers=tutor_headers)

        assert response.status_code == 200
        assert client.get(f"{MATERIALS_URL}/{material.id}").status_code == 404
        assert client.get(f"/api/v1/tests/{test.id}").status_code == 404

    def test_delete_with_results_returns_409(
        self, client, db_session, tutor, student, tutor_headers, material
    ):
        service = test_service.TestService(db_session)
        test = service.create_test(material.id, make_questions(3), tutor.id)
        service.submit_test(test.id, student.id, {})

        response = client.delete(f"{MATERIALS_URL}/{material.id}", headers=tutor_headers)

        assert response.status_code == 409
        assert client.get(f"{MATERIALS_URL}/{material.id}").status_code == 200

    def test_student_cannot_delete(self, client, student_headers, material):
        assert client.delete(f"{MATERIALS_URL}/{material.id}", headers=student_headers).status_code == 403
