from fastapi import status

API = "/api/v1/split"


def upload_pdf(client, data, filename="doc.pdf"):
    return client.post(
        f"{API}/", files={"file": (filename, data, "application/pdf")}
    )


def test_start_split(client, ten_page_pdf):
    response = upload_pdf(client, ten_page_pdf)

    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["page_count"] == 10
    assert body["filename"] == "doc.pdf"
    assert body["status"] == {
        "level": "success",
        "message": "PDF loaded successfully. Total pages: 10",
    }
    assert body["preview"]["label"] == "Preview - Page 1 of 10"
    assert body["preview"]["width"] == 200


def test_start_split_invalid_pdf(client):
    response = upload_pdf(client, b"this is not a pdf")

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    body = response.json()
    assert body["detail"].startswith("Failed to load 'doc.pdf'")
    assert body["status"]["level"] == "error"
    assert body["status"]["message"].startswith("Error: Failed to load")


def test_start_split_missing_file(client):
    response = client.post(f"{API}/")

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_get_split(client, ten_page_pdf):
    workflow_id = upload_pdf(client, ten_page_pdf).json()["workflow_id"]

    response = client.get(f"{API}/{workflow_id}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["workflow_id"] == workflow_id


def test_extract_download(client, ten_page_pdf):
    workflow_id = upload_pdf(client, ten_page_pdf).json()["workflow_id"]

    response = client.post(
        f"{API}/{workflow_id}/extract", json={"range": "1,3-5,7"}
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["content-type"] == "application/pdf"
    assert (
        response.headers["content-disposition"]
        == 'attachment; filename="split-pages-1_3-5_7.pdf"'
    )
    assert response.headers["x-page-count"] == "5"
    assert response.headers["x-status-message"] == "Successfully extracted 5 page(s)!"
    assert response.content.startswith(b"%PDF")


def test_extract_non_ascii_range_is_encoded(client, ten_page_pdf):
    workflow_id = upload_pdf(client, ten_page_pdf).json()["workflow_id"]

    response = client.post(
        f"{API}/{workflow_id}/extract", json={"range": "1,2,é"}
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["content-disposition"] == (
        "attachment; filename*=utf-8''split-pages-1_2_%C3%A9.pdf"
    )


def test_extract_empty_range(client, ten_page_pdf):
    workflow_id = upload_pdf(client, ten_page_pdf).json()["workflow_id"]

    response = client.post(f"{API}/{workflow_id}/extract", json={"range": " "})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Please enter page numbers to extract"


def test_extract_no_valid_pages(client, ten_page_pdf):
    workflow_id = upload_pdf(client, ten_page_pdf).json()["workflow_id"]

    response = client.post(f"{API}/{workflow_id}/extract", json={"range": "0,100"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["status"] == {
        "level": "error",
        "message": "Error: No valid pages found in range",
    }


def test_extract_unknown_workflow(client):
    response = client.post(f"{API}/missing/extract", json={"range": "1"})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Split workflow missing not found"


def test_discard_split(client, ten_page_pdf):
    workflow_id = upload_pdf(client, ten_page_pdf).json()["workflow_id"]

    response = client.delete(f"{API}/{workflow_id}")

    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert client.get(f"{API}/{workflow_id}").status_code == 404


def test_upload_too_large(client, ten_page_pdf, monkeypatch):
    from pdftools.core.config import settings

    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_MB", 0)

    response = upload_pdf(client, ten_page_pdf)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "upload limit" in response.json()["detail"]
