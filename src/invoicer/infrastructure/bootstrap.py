"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from invoicer.application.document_renderer import InvoiceDocumentRenderer
from invoicer.domain.service.invoice_number_generator import InvoiceNumberGenerator
from invoicer.infrastructure.config import Settings, load_settings
from invoicer.infrastructure.persistence.json_invoice_repository import (
    JsonInvoiceItemRepository,
    JsonInvoiceRepository,
)
from invoicer.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from invoicer.infrastructure.persistence.json_user_repository import JsonUserRepository
from invoicer.infrastructure.rendering.reportlab_engine import ReportLabDocumentEngine
from invoicer.infrastructure.security.jwt_tokens import JwtTokenService
from invoicer.infrastructure.security.passlib_hasher import PasslibPasswordHasher


@lru_cache(maxsize=1)
def settings() -> Settings:
    return load_settings()


def user_repository() -> JsonUserRepository:
    return JsonUserRepository(settings().data_dir / "users.json")


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def invoice_repository() -> JsonInvoiceRepository:
    return JsonInvoiceRepository(settings().data_dir / "invoices.json")


def invoice_item_repository() -> JsonInvoiceItemRepository:
    return JsonInvoiceItemRepository(settings().data_dir / "invoice_items.json")


@lru_cache(maxsize=1)
def invoice_number_generator() -> InvoiceNumberGenerator:
    return InvoiceNumberGenerator()


def document_renderer() -> InvoiceDocumentRenderer:
    return InvoiceDocumentRenderer(ReportLabDocumentEngine())


def password_hasher() -> PasslibPasswordHasher:
    return PasslibPasswordHasher()


def token_service() -> JwtTokenService:
    cfg = settings()
    return JwtTokenService(cfg.secret_key, ttl_hours=cfg.token_ttl_hours)
