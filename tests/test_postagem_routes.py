"""Testes HTTP para /postagens e /temas."""

import pytest


@pytest.fixture
def tema(client, auth) -> dict:
    resp = client.post("/temas", auth=auth, json={"descricao": "Tecnologia"})
    assert resp.status_code == 201
    return resp.json()


def _nova_postagem(client, auth, titulo="Category One", **extra) -> dict:
    resp = client.post(
        "/postagens",
        auth=auth,
        json={"titulo": titulo, "texto": "Texto da postagem.", **extra},
    )
    assert resp.status_code == 201
    return resp.json()


class TestPostagens:
    def test_criar_retorna_201(self, client, auth, tema, maria) -> None:
        body = _nova_postagem(
            client, auth, tema={"id": tema["id"]}, usuario={"id": maria["id"]}
        )

        assert body["id"] > 0
        assert body["data"] is not None
        assert body["tema"] == {"id": tema["id"], "descricao": "Tecnologia"}
        assert body["usuario"]["usuario"] == "maria"
        assert "senha" not in body["usuario"]

    def test_criar_com_tema_inexistente_retorna_400(self, client, auth) -> None:
        resp = client.post(
            "/postagens",
            auth=auth,
            json={"titulo": "Título", "texto": "Texto da postagem.", "tema": {"id": 99}},
        )
        assert resp.status_code == 400

    def test_listar(self, client, auth) -> None:
        _nova_postagem(client, auth, "Primeira")
        _nova_postagem(client, auth, "Segunda")

        resp = client.get("/postagens", auth=auth)

        assert resp.status_code == 200
        assert [p["titulo"] for p in resp.json()] == ["Primeira", "Segunda"]

    def test_data_serializada_em_utc(self, client, auth) -> None:
        body = _nova_postagem(client, auth)
        assert body["data"].endswith(("Z", "+00:00"))

    def test_buscar_por_id(self, client, auth) -> None:
        criada = _nova_postagem(client, auth)
        resp = client.get(f"/postagens/{criada['id']}", auth=auth)
        assert resp.status_code == 200
        assert resp.json()["titulo"] == "Category One"

    def test_buscar_inexistente_retorna_404(self, client, auth) -> None:
        assert client.get("/postagens/999", auth=auth).status_code == 404

    def test_atualizar(self, client, auth) -> None:
        criada = _nova_postagem(client, auth)

        resp = client.put(
            "/postagens",
            auth=auth,
            json={"id": criada["id"], "titulo": "Outro título", "texto": "Outro texto aqui."},
        )

        assert resp.status_code == 200
        assert resp.json()["id"] == criada["id"]
        assert resp.json()["titulo"] == "Outro título"

    def test_atualizar_sem_id_retorna_422(self, client, auth) -> None:
        resp = client.put(
            "/postagens",
            auth=auth,
            json={"titulo": "Sem id aqui", "texto": "Texto da postagem."},
        )
        assert resp.status_code == 422

    def test_deletar(self, client, auth) -> None:
        criada = _nova_postagem(client, auth)

        resp = client.delete(f"/postagens/{criada['id']}", auth=auth)

        assert resp.status_code == 200
        assert resp.content == b""
        assert client.get(f"/postagens/{criada['id']}", auth=auth).status_code == 404

    def test_deletar_inexistente_e_silencioso(self, client, auth) -> None:
        _nova_postagem(client, auth)

        resp = client.delete("/postagens/12345", auth=auth)

        assert resp.status_code == 200
        assert len(client.get("/postagens", auth=auth).json()) == 1

    def test_busca_por_titulo(self, client, auth) -> None:
        _nova_postagem(client, auth, "Category One")
        _nova_postagem(client, auth, "Outro assunto")

        resp = client.get("/postagens/titulo/cat", auth=auth)

        assert resp.status_code == 200
        assert [p["titulo"] for p in resp.json()] == ["Category One"]


class TestTemas:
    def test_tema_lista_suas_postagens(self, client, auth, tema) -> None:
        _nova_postagem(client, auth, tema={"id": tema["id"]})

        resp = client.get(f"/temas/{tema['id']}", auth=auth)

        assert resp.status_code == 200
        postagens = resp.json()["postagem"]
        assert [p["titulo"] for p in postagens] == ["Category One"]
        assert "tema" not in postagens[0]

    def test_buscar_inexistente_retorna_404(self, client, auth) -> None:
        assert client.get("/temas/999", auth=auth).status_code == 404

    def test_busca_por_descricao(self, client, auth, tema) -> None:
        client.post("/temas", auth=auth, json={"descricao": "Culinária"})

        resp = client.get("/temas/descricao/TECNO", auth=auth)

        assert [t["descricao"] for t in resp.json()] == ["Tecnologia"]

    def test_atualizar(self, client, auth, tema) -> None:
        resp = client.put(
            "/temas", auth=auth, json={"id": tema["id"], "descricao": "Ciência"}
        )
        assert resp.status_code == 200
        assert resp.json()["descricao"] == "Ciência"

    def test_deletar_remove_postagens(self, client, auth, tema) -> None:
        _nova_postagem(client, auth, tema={"id": tema["id"]})

        resp = client.delete(f"/temas/{tema['id']}", auth=auth)

        assert resp.status_code == 200
        assert client.get("/temas", auth=auth).json() == []
        assert client.get("/postagens", auth=auth).json() == []

    def test_deletar_inexistente_e_silencioso(self, client, auth, tema) -> None:
        assert client.delete("/temas/999", auth=auth).status_code == 200
        assert len(client.get("/temas", auth=auth).json()) == 1
