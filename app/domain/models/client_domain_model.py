# app/domain/models/client_domain_model.py

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional


@dataclass(frozen=True)
class Client:
    """Domain model for a registered API client."""
    cnpj: str  # Public identifier
    nome: str
    secret_enc: str  # Encrypted secret, never the plaintext
    created_at: Optional[datetime] = None

    def projection(self) -> Dict[str, str]:
        """Public view of the client, without any secret material."""
        return {"cnpj": self.cnpj, "nome": self.nome}
