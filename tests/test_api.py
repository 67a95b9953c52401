from fastapi.testclient import TestClient

from api import app


client = TestClient(app)


def test_parse_text():
	resp = client.post("/parse", json={"text": "ns App\nif Greeter\ns greet(s name)", "source": "g.ez"})
	assert resp.status_code == 200
	body = resp.json()
	assert body["name"] == "g.ez"
	method = body["namespaces"][0]["interfaces"][0]["methods"][0]
	assert method["name"] == "greet"
	assert method["parameters"] == [
		{"name": "name", "type": "string", "accessibility": "public", "description": None}
	]


def test_parse_error_is_bad_request():
	resp = client.post("/parse", json={"text": "ns App\ni orphan"})
	assert resp.status_code == 400
	detail = resp.json()["detail"]
	assert detail["code"] == "MISSING_CONTAINER"
	assert detail["line"] == 2
	assert detail["path"] == "<input>"


def test_parse_file(tmp_path):
	p = tmp_path / "shop.ez"
	p.write_text("ns Shop\ne Size\ni Small\ni Large\n")
	resp = client.post("/parse-file", json={"path": str(p)})
	assert resp.status_code == 200
	enum = resp.json()["namespaces"][0]["enums"][0]
	assert [v["name"] for v in enum["properties"]] == ["Small", "Large"]


def test_parse_file_missing_path(tmp_path):
	resp = client.post("/parse-file", json={"path": str(tmp_path / "nope.ez")})
	assert resp.status_code == 400
