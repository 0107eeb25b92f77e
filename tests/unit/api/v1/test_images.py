import io

from fastapi import status
from pypdf import PdfReader

API = "/api/v1/images"


def image_files(*items):
    return [
        ("files", (name, data, content_type))
        for name, data, content_type in items
    ]


def test_convert_flow(client, make_image):
    created = client.post(
        f"{API}/",
        files=image_files(
            ("a.png", make_image(30, 20, "PNG"), "image/png"),
            ("b.jpg", make_image(15, 45, "JPEG"), "image/jpeg"),
        ),
    )
    assert created.status_code == status.HTTP_201_CREATED
    assert created.json()["status"]["message"] == "2 image(s) selected"
    workflow_id = created.json()["workflow_id"]

    response = client.post(f"{API}/{workflow_id}/convert")

    assert response.status_code == status.HTTP_200_OK
    assert (
        response.headers["content-disposition"]
        == 'attachment; filename="converted-images.pdf"'
    )
    assert response.headers["x-page-count"] == "2"
    pages = PdfReader(io.BytesIO(response.content)).pages
    assert [
        (float(p.mediabox.width), float(p.mediabox.height)) for p in pages
    ] == [(30, 20), (15, 45)]


def test_new_selection_replaces_previous(client, make_image):
    workflow_id = client.post(
        f"{API}/",
        files=image_files(("a.png", make_image(), "image/png")),
    ).json()["workflow_id"]

    response = client.put(
        f"{API}/{workflow_id}/files",
        files=image_files(
            ("b.png", make_image(), "image/png"),
            ("c.png", make_image(), "image/png"),
        ),
    )

    assert [f["filename"] for f in response.json()["files"]] == ["b.png", "c.png"]
    converted = client.post(f"{API}/{workflow_id}/convert")
    assert converted.headers["x-page-count"] == "2"


def test_unsupported_type(client, make_image):
    workflow_id = client.post(
        f"{API}/",
        files=image_files(
            ("a.png", make_image(), "image/png"),
            ("b.gif", make_image(image_format="GIF"), "image/gif"),
        ),
    ).json()["workflow_id"]

    response = client.post(f"{API}/{workflow_id}/convert")

    assert response.status_code == status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    assert response.json()["detail"] == "Unsupported image type: image/gif"
    assert len(client.get(f"{API}/{workflow_id}").json()["files"]) == 2


def test_unknown_workflow(client):
    assert client.post(f"{API}/missing/convert").status_code == 404
