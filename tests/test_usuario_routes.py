"""Testes HTTP para /usuarios e para a autenticação Basic."""

import bcrypt

import config


class TestCadastrar:
    def test_retorna_201_com_hash(self, client) -> None:
        resp = client.post(
            "/usuarios/cadastrar",
            json={"nome": "Maria", "usuario": "maria", "senha": "123456"},
        )

        assert resp.status_code == 201
        body = resp.json()
        assert body["id"] > 0
        assert body["usuario"] == "maria"
        assert body["senha"] != "123456"
        assert bcrypt.checkpw(b"123456", body["senha"].encode())
        assert body["postagem"] == []

    def test_duplicado_retorna_409(self, client, maria) -> None:
        resp = client.post(
            "/usuarios/cadastrar",
            json={"nome": "Outra Maria", "usuario": "maria", "senha": "abcdef"},
        )
        assert resp.status_code == 409

    def test_cadastro_nao_exige_autenticacao(self, client) -> None:
        resp = client.post(
            "/usuarios/cadastrar",
            json={"nome": "Ana", "usuario": "ana", "senha": "x"},
        )
        assert resp.status_code == 201


class TestLogar:
    def test_token_basic(self, client, maria) -> None:
        resp = client.post("/usuarios/logar", json={"usuario": "maria", "senha": "123456"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["token"] == "Basic bWFyaWE6MTIzNDU2"
        assert body["id"] == maria["id"]
        assert body["nome"] == "Maria da Silva"
        assert body["senha"] == maria["senha"]

    def test_senha_errada_retorna_401(self, client, maria) -> None:
        resp = client.post("/usuarios/logar", json={"usuario": "maria", "senha": "errada"})
        assert resp.status_code == 401

    def test_usuario_inexistente_retorna_401(self, client) -> None:
        resp = client.post("/usuarios/logar", json={"usuario": "ninguem", "senha": "123"})
        assert resp.status_code == 401

    def test_token_serve_como_authorization(self, client, maria) -> None:
        token = client.post(
            "/usuarios/logar", json={"usuario": "maria", "senha": "123456"}
        ).json()["token"]

        resp = client.get("/postagens", headers={"Authorization": token})

        assert resp.status_code == 200


class TestRotasProtegidas:
    def test_sem_credenciais_retorna_401(self, client, maria) -> None:
        resp = client.get("/usuarios/all")
        assert resp.status_code == 401
        assert resp.headers["www-authenticate"] == "Basic"

    def test_credenciais_invalidas_retorna_401(self, client, maria) -> None:
        resp = client.get("/temas", auth=("maria", "errada"))
        assert resp.status_code == 401

    def test_autenticacao_desligada(self, client, monkeypatch) -> None:
        monkeypatch.setattr(config, "REQUIRE_AUTH", False)
        assert client.get("/postagens").status_code == 200

    def test_health_e_publico(self, client) -> None:
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestConsultaEAtualizacao:
    def test_listar_e_buscar(self, client, auth, maria) -> None:
        todos = client.get("/usuarios/all", auth=auth)
        assert todos.status_code == 200
        assert [u["usuario"] for u in todos.json()] == ["maria"]

        um = client.get(f"/usuarios/{maria['id']}", auth=auth)
        assert um.status_code == 200
        assert um.json()["nome"] == "Maria da Silva"

    def test_buscar_inexistente_retorna_404(self, client, auth) -> None:
        assert client.get("/usuarios/999", auth=auth).status_code == 404

    def test_atualizar(self, client, auth, maria) -> None:
        resp = client.put(
            "/usuarios/atualizar",
            auth=auth,
            json={"id": maria["id"], "nome": "Maria S.", "usuario": "maria", "senha": "nova-senha"},
        )

        assert resp.status_code == 200
        assert resp.json()["nome"] == "Maria S."
        assert client.get("/usuarios/all", auth=("maria", "nova-senha")).status_code == 200

    def test_atualizar_inexistente_retorna_404(self, client, auth) -> None:
        resp = client.put(
            "/usuarios/atualizar",
            auth=auth,
            json={"id": 999, "nome": "X", "usuario": "x", "senha": "y"},
        )
        assert resp.status_code == 404

    def test_atualizar_para_usuario_existente_retorna_409(self, client, auth, maria) -> None:
        outro = client.post(
            "/usuarios/cadastrar",
            json={"nome": "Ana", "usuario": "ana", "senha": "abc"},
        ).json()

        resp = client.put(
            "/usuarios/atualizar",
            auth=auth,
            json={"id": outro["id"], "nome": "Ana", "usuario": "maria", "senha": "abc"},
        )

        assert resp.status_code == 409
