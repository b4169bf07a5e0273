# =============================================================================
# tests/test_chat_routes.py - Chat Endpoint Tests
# =============================================================================
# The assistant is replaced with a MagicMock through dependency overrides,
# so these tests never call OpenAI.
# =============================================================================

from agents.trading_assistant import AIServiceError


class TestChatEndpoint:

    def test_returns_assistant_response(self, client, mock_assistant):
        mock_assistant.get_chat_response.return_value = "## SOL Outlook\n\n- Hold"

        response = client.post("/api/chat", json={"message": "Should I buy SOL?"})

        assert response.status_code == 200
        assert response.json() == {"response": "## SOL Outlook\n\n- Hold"}
        mock_assistant.get_chat_response.assert_called_once_with("Should I buy SOL?", None)

    def test_passes_context_through(self, client, mock_assistant, sample_portfolio_dict):
        mock_assistant.get_chat_response.return_value = "Rebalance"
        context = {"portfolio": sample_portfolio_dict}

        client.post("/api/chat", json={"message": "Rebalance my portfolio?", "context": context})

        mock_assistant.get_chat_response.assert_called_once_with("Rebalance my portfolio?", context)

    def test_missing_message(self, client, mock_assistant):
        response = client.post("/api/chat", json={})

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "Message is required"
        assert data["code"] == "INVALID_REQUEST"
        mock_assistant.get_chat_response.assert_not_called()

    def test_empty_message(self, client, mock_assistant):
        response = client.post("/api/chat", json={"message": ""})

        assert response.status_code == 400
        assert response.json()["error"] == "Message is required"

    def test_long_message_reaches_assistant(self, client, mock_assistant):
        mock_assistant.get_chat_response.return_value = "Keep DCA going."
        message = "Should I buy SOL? " * 300

        response = client.post("/api/chat", json={"message": message})

        assert len(message) > 4000
        assert response.status_code == 200
        assert response.json() == {"response": "Keep DCA going."}
        mock_assistant.get_chat_response.assert_called_once_with(message, None)

    def test_malformed_body(self, client, mock_assistant):
        response = client.post(
            "/api/chat",
            content="not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_REQUEST"

    def test_assistant_failure_is_generic_500(self, client, mock_assistant):
        mock_assistant.get_chat_response.side_effect = AIServiceError(
            "OpenAI request failed: secret upstream detail",
            code="AI_REQUEST_FAILED",
        )

        response = client.post("/api/chat", json={"message": "Should I buy SOL?"})

        assert response.status_code == 500
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "Failed to get chat response"
        assert data["code"] == "DELEGATE_FAILURE"
        assert "secret upstream detail" not in response.text

    def test_unexpected_exception_is_500(self, client, mock_assistant):
        mock_assistant.get_chat_response.side_effect = RuntimeError("boom")

        response = client.post("/api/chat", json={"message": "What about BONK?"})

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to get chat response"


class TestPromptsEndpoint:

    def test_lists_all_prompts(self, client):
        response = client.get("/api/chat/prompts")

        assert response.status_code == 200
        prompts = response.json()
        assert len(prompts) == 8
        assert {"id", "title", "description", "prompt", "category", "icon"} <= set(prompts[0])

    def test_filter_by_category(self, client):
        response = client.get("/api/chat/prompts", params={"category": "trending"})

        ids = [p["id"] for p in response.json()]
        assert ids == ["trending-analysis", "meme-coin-analysis"]

    def test_unknown_category(self, client):
        response = client.get("/api/chat/prompts", params={"category": "astrology"})

        assert response.status_code == 400

    def test_get_prompt_by_id(self, client):
        response = client.get("/api/chat/prompts/dca-strategy")

        assert response.status_code == 200
        assert response.json()["title"] == "DCA Strategy"
        assert response.json()["category"] == "strategy"

    def test_unknown_prompt_id(self, client):
        response = client.get("/api/chat/prompts/moon-shot")

        assert response.status_code == 404
        body = response.json()
        assert body["code"] == "PROMPT_NOT_FOUND"
        assert body["details"] == {"promptId": "moon-shot"}
