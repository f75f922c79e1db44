#!/usr/bin/env python3
"""
JUPAG - Jupiter client tests

Every endpoint is exercised against a recording fake transport.

Run with: pytest tests/test_client.py -v
"""

from dataclasses import fields

import aiohttp
import pytest

from conftest import JUP, QUOTE, SOL, TOKEN, USDC, WALLET
from jupag.core.transport import AiohttpTransport, HttpResponse
from jupag.exceptions import ApiError, RequestError, ResponseParseError
from jupag.types import (
    CancelRecurringOrderRequest,
    CancelTriggerOrders,
    Category,
    CreateRecurringOrderRequest,
    CreateTriggerOrder,
    DexEnum,
    GetRecurringOrders,
    GetTriggerOrders,
    Interval,
    OrderStatus,
    QuoteRequest,
    RecurringOrderType,
    SwapMode,
    SwapRequest,
    UltraExecuteOrderRequest,
    UltraOrderRequest,
    UltraStatus,
)


class TestRequestHandling:
    """Status, transport and body failures."""

    @pytest.mark.asyncio
    async def test_api_error_carries_status(self, client, transport):
        transport.respond("GET", "/swap/v1/quote", '{"error":"Could not find any route"}', status=400)

        with pytest.raises(ApiError) as exc:
            await client.get_quote(QuoteRequest(input_mint=SOL, output_mint=USDC, amount=1))

        assert exc.value.status == 400
        assert "Could not find any route" in exc.value.message
        assert "Status Code: 400" in str(exc.value)

    @pytest.mark.asyncio
    async def test_api_error_empty_body(self, client, transport):
        transport.respond("GET", "/tokens/v2/recent", "", status=500)

        with pytest.raises(ApiError) as exc:
            await client.get_recent_tokens()

        assert exc.value.message == "Unable to get error details"

    @pytest.mark.asyncio
    async def test_transport_failure(self, client, transport):
        transport.fail("GET", "/ultra/v1/order/routers", aiohttp.ClientConnectionError("refused"))

        with pytest.raises(RequestError):
            await client.routers()

    @pytest.mark.asyncio
    async def test_invalid_json(self, client, transport):
        transport.respond("GET", "/tokens/v2/recent", "<html>gateway</html>")

        with pytest.raises(ResponseParseError):
            await client.get_recent_tokens()

    @pytest.mark.asyncio
    async def test_wrong_shape(self, client, transport):
        transport.respond("GET", "/price/v3", {"JUP": {"decimals": "six"}})

        with pytest.raises(ResponseParseError):
            await client.get_tokens_price([JUP])

    @pytest.mark.asyncio
    async def test_context_manager_closes_transport(self, client, transport):
        async with client:
            pass
        assert transport.closed

    def test_api_key_header(self):
        assert AiohttpTransport(api_key="secret").headers["x-api-key"] == "secret"
        assert "x-api-key" not in AiohttpTransport().headers

    @pytest.mark.parametrize("status,ok", [(200, True), (204, True), (301, False), (404, False)])
    def test_response_ok_range(self, status, ok):
        assert HttpResponse(status=status, text="").ok is ok

    def test_response_carries_raw_text(self):
        # Body parsing happens in the client
        assert [f.name for f in fields(HttpResponse)] == ["status", "text"]


class TestSwapApi:
    @pytest.mark.asyncio
    async def test_get_quote_params(self, client, transport):
        transport.respond("GET", "/swap/v1/quote", QUOTE)

        quote = await client.get_quote(
            QuoteRequest(
                input_mint=SOL,
                output_mint=USDC,
                amount=1_000_000,
                swap_mode=SwapMode.EXACT_OUT,
                dexes=[DexEnum.WHIRLPOOL, DexEnum.METEORA],
                only_direct_routes=False,
            )
        )

        assert transport.last["params"] == {
            "inputMint": SOL,
            "outputMint": USDC,
            "amount": "1000000",
            "swapMode": "ExactOut",
            "dexes": "Whirlpool,Meteora",
            "onlyDirectRoutes": "false",
        }
        assert quote.out_amount == "150000"
        assert quote.route_plan[0].swap_info.label == "Meteora DLMM"

    @pytest.mark.asyncio
    async def test_swap_request_echoes_quote(self, client, transport):
        transport.respond("GET", "/swap/v1/quote", QUOTE)
        transport.respond(
            "POST", "/swap/v1/swap",
            {"swapTransaction": "AQID", "lastValidBlockHeight": 279632475, "prioritizationFeeLamports": 9999},
        )

        quote = await client.get_quote(QuoteRequest(input_mint=SOL, output_mint=USDC, amount=1_000_000))
        swap = await client.get_swap_transaction(
            SwapRequest(user_public_key=WALLET, quote_response=quote, dynamic_compute_unit_limit=True)
        )

        body = transport.last["json"]
        assert body["userPublicKey"] == WALLET
        assert body["dynamicComputeUnitLimit"] is True
        assert body["quoteResponse"]["swapUsdValue"] == "0.15"
        assert body["quoteResponse"]["routePlan"][0]["swapInfo"]["ammKey"]
        assert "payer" not in body
        assert swap.swap_transaction == "AQID"
        assert swap.last_valid_block_height == 279632475

    @pytest.mark.asyncio
    async def test_swap_instructions(self, client, transport):
        transport.respond("GET", "/swap/v1/quote", QUOTE)
        transport.respond("POST", "/swap/v1/swap-instructions", {
            "computeBudgetInstructions": [],
            "setupInstructions": [],
            "swapInstruction": {
                "programId": "JUP6LkbZbjS1jKKwapdHNy74zcZ3tLUZoi5QNyVTaV4",
                "accounts": [{"pubkey": WALLET, "isSigner": True, "isWritable": True}],
                "data": "AQ==",
            },
            "addressLookupTableAddresses": ["GxS6FiQ3mNnAar9HGQ6mxP7t6FcwmHkU7peSeQDUHmpN"],
        })

        quote = await client.get_quote(QuoteRequest(input_mint=SOL, output_mint=USDC, amount=1))
        response = await client.get_swap_instructions(
            SwapRequest(user_public_key=WALLET, quote_response=quote)
        )

        assert response.swap_instruction.accounts[0].is_signer
        assert response.address_lookup_table_addresses == ["GxS6FiQ3mNnAar9HGQ6mxP7t6FcwmHkU7peSeQDUHmpN"]
        assert response.cleanup_instruction is None

    @pytest.mark.asyncio
    async def test_program_id_to_label(self, client, transport):
        transport.respond("GET", "/swap/v1/program-id-to-label", {"whirLbMiicVdio4qvUfM5KAg6Ct8VwpYzGff3uctyCc": "Whirlpool"})

        labels = await client.program_id_to_label()

        assert labels["whirLbMiicVdio4qvUfM5KAg6Ct8VwpYzGff3uctyCc"] == "Whirlpool"


class TestUltraApi:
    @pytest.mark.asyncio
    async def test_order_params(self, client, transport):
        transport.respond("GET", "/ultra/v1/order", {
            "inputMint": USDC, "outputMint": SOL, "inAmount": "1000000", "outAmount": "6000000",
            "otherAmountThreshold": "5990000", "swapMode": "ExactIn", "slippageBps": 10,
            "priceImpactPct": "0", "routePlan": [], "feeBps": 5, "prioritizationFeeLamports": 0,
            "swapType": "aggregator", "transaction": None, "gasless": False,
            "requestId": "req-1", "totalTime": 120,
        })

        order = await client.get_ultra_order(
            UltraOrderRequest(input_mint=USDC, output_mint=SOL, amount=1_000_000, exclude_routers=["dflow", "okx"])
        )

        assert transport.last["params"] == {
            "inputMint": USDC, "outputMint": SOL, "amount": "1000000", "excludeRouters": "dflow,okx",
        }
        assert order.transaction is None
        assert order.request_id == "req-1"

    @pytest.mark.asyncio
    async def test_execute(self, client, transport):
        transport.respond("POST", "/ultra/v1/execute", {
            "status": "Success", "signature": "5sig", "slot": "1", "code": 0,
            "swapEvents": [{"inputMint": USDC, "inputAmount": "1", "outputMint": SOL, "outputAmount": "2"}],
        })

        result = await client.ultra_execute_order(
            UltraExecuteOrderRequest(signed_transaction="AQID", request_id="req-1")
        )

        assert transport.last["json"] == {"signedTransaction": "AQID", "requestId": "req-1"}
        assert result.status == UltraStatus.SUCCESS
        assert result.swap_events[0].output_amount == "2"

    @pytest.mark.asyncio
    async def test_balances_path(self, client, transport):
        transport.respond("GET", f"/ultra/v1/balances/{WALLET}", {
            "SOL": {"amount": "1000", "uiAmount": 0.000001, "slot": 5, "isFrozen": False},
        })

        balances = await client.get_token_balances(WALLET)

        assert balances["SOL"].ui_amount == 0.000001
        assert not balances["SOL"].is_frozen

    @pytest.mark.asyncio
    async def test_shield(self, client, transport):
        transport.respond("GET", "/ultra/v1/shield", {
            "warnings": {JUP: [{"type": "NOT_VERIFIED", "message": "Not verified", "severity": "warning"}]},
        })

        shield = await client.shield([SOL, JUP])

        assert transport.last["params"] == {"mints": f"{SOL},{JUP}"}
        assert shield.warnings[JUP][0].warning_type == "NOT_VERIFIED"

    @pytest.mark.asyncio
    async def test_search_and_routers(self, client, transport):
        transport.respond("GET", "/ultra/v1/search", [TOKEN])
        transport.respond("GET", "/ultra/v1/order/routers", [{"id": "metis", "name": "Metis", "icon": "x"}])

        tokens = await client.ultra_token_search(["JUP"])
        routers = await client.routers()

        assert tokens[0].symbol == "JUP"
        assert routers[0].id == "metis"


class TestTokenApi:
    @pytest.mark.asyncio
    async def test_search(self, client, transport):
        transport.respond("GET", "/tokens/v2/search", [TOKEN])

        tokens = await client.token_search([JUP, SOL])

        assert transport.last["params"] == {"query": f"{JUP},{SOL}"}
        assert tokens[0].id == JUP

    @pytest.mark.asyncio
    async def test_tags(self, client, transport):
        transport.respond("GET", "/tokens/v2/tag", [TOKEN])

        await client.get_mints_by_tags(["verified", "lst"])

        assert transport.last["params"] == {"query": "verified,lst"}

    @pytest.mark.asyncio
    async def test_category_path(self, client, transport):
        transport.respond("GET", "/tokens/v2/toptrending/1h", [TOKEN])

        await client.get_tokens_by_category(Category.TOP_TRENDING, Interval.ONE_HOUR, limit=10)

        assert transport.last["params"] == {"limit": "10"}

    @pytest.mark.asyncio
    async def test_category_without_limit(self, client, transport):
        transport.respond("GET", "/tokens/v2/toptraded/24h", [])

        assert await client.get_tokens_by_category(Category.TOP_TRADED, Interval.TWENTY_FOUR_HOURS) == []
        assert transport.last["params"] is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [0, 101])
    async def test_category_limit_bounds(self, client, transport, limit):
        with pytest.raises(ValueError):
            await client.get_tokens_by_category(Category.TOP_TRADED, Interval.FIVE_MINUTES, limit=limit)
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_price(self, client, transport):
        transport.respond("GET", "/price/v3", {
            JUP: {"usdPrice": 0.42, "blockId": 348004023, "decimals": 6, "priceChange24h": -1.5},
        })

        prices = await client.get_tokens_price([JUP, "unknownmint"])

        assert transport.last["params"] == {"ids": f"{JUP},unknownmint"}
        assert prices[JUP].usd_price == 0.42
        assert prices[JUP].price_change_24h == -1.5
        assert "unknownmint" not in prices


class TestTriggerApi:
    @pytest.mark.asyncio
    async def test_create_order_body(self, client, transport):
        transport.respond("POST", "/trigger/v1/createOrder", {
            "requestId": "req-2", "transaction": "AQID", "order": "order-1", "code": 200,
        })

        response = await client.create_trigger_order(
            CreateTriggerOrder.new(USDC, JUP, WALLET, WALLET, 10_000_000, 20_000_000, slippage_bps=0)
        )

        assert transport.last["json"] == {
            "inputMint": USDC,
            "outputMint": JUP,
            "maker": WALLET,
            "payer": WALLET,
            "params": {"makingAmount": "10000000", "takingAmount": "20000000", "slippageBps": "0"},
        }
        assert response.order == "order-1"

    @pytest.mark.asyncio
    async def test_cancel_orders_joined(self, client, transport):
        transport.respond("POST", "/trigger/v1/cancelOrders", {
            "requestId": "req-3", "transactions": ["AQID", "BAUG"], "code": 200,
        })

        response = await client.cancel_trigger_orders(CancelTriggerOrders(maker=WALLET, orders=["o1", "o2"]))

        assert transport.last["json"] == {"maker": WALLET, "order": "o1,o2"}
        assert response.transactions == ["AQID", "BAUG"]
        assert response.transaction == ""

    @pytest.mark.asyncio
    async def test_get_orders_params(self, client, transport):
        transport.respond("GET", "/trigger/v1/getTriggerOrders", {
            "user": WALLET, "orderStatus": "history", "orders": [], "totalPages": 1, "page": 1,
        })

        orders = await client.get_trigger_orders(GetTriggerOrders(user=WALLET, order_status=OrderStatus.HISTORY))

        assert transport.last["params"] == {
            "user": WALLET, "orderStatus": "history", "includeFailedTx": "false",
        }
        assert orders.orders == []


class TestRecurringApi:
    @pytest.mark.asyncio
    async def test_create_time_order(self, client, transport):
        transport.respond("POST", "/recurring/v1/createOrder", {"requestId": "req-4", "transaction": "AQID"})

        await client.create_recurring_order(
            CreateRecurringOrderRequest.time_order(WALLET, USDC, SOL, 104_000_000, 2, 86_400)
        )

        assert transport.last["json"] == {
            "user": WALLET,
            "inputMint": USDC,
            "outputMint": SOL,
            "params": {"time": {"inAmount": 104000000, "numberOfOrders": 2, "interval": 86400}},
        }

    @pytest.mark.asyncio
    async def test_cancel(self, client, transport):
        transport.respond("POST", "/recurring/v1/cancelOrder", {"requestId": "req-5", "transaction": "AQID"})

        await client.cancel_recurring_order(
            CancelRecurringOrderRequest(order="o1", recurring_type=RecurringOrderType.TIME, user=WALLET)
        )

        assert transport.last["json"] == {"order": "o1", "recurringType": "time", "user": WALLET}

    @pytest.mark.asyncio
    async def test_get_orders_defaults(self, client, transport):
        transport.respond("GET", "/recurring/v1/getRecurringOrders", {
            "orderStatus": "active", "page": 1, "totalPages": 1, "user": WALLET, "all": [],
        })

        orders = await client.get_recurring_orders(
            GetRecurringOrders(recurring_type=RecurringOrderType.ALL, order_status=OrderStatus.ACTIVE, user=WALLET)
        )

        assert transport.last["params"] == {
            "recurringType": "all",
            "orderStatus": "active",
            "user": WALLET,
            "page": "1",
            "includeFailedTx": "false",
        }
        assert orders.all == []
