# app/adapters/outbound/security/admin_auth.py

from typing import Optional

from passlib.context import CryptContext

crypt_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class AdminAuthManager:
    """
    Validação da senha administrativa que protege as rotas de gestão
    de clientes.
    """

    crypt_context = crypt_context

    @classmethod
    def gerar_hash(cls, senha: str) -> str:
        """
        Gera um hash seguro para a senha fornecida.
        """
        return cls.crypt_context.hash(senha)

    @classmethod
    def validate(cls, plain_password: Optional[str], hashed_password: str) -> bool:
        if not plain_password:
            return False
        try:
            return cls.crypt_context.verify(plain_password, hashed_password)
        except ValueError:
            # Hash configurado em formato desconhecido
            return False


if __name__ == "__main__":
    import getpass

    print("Gerador de hash para ADMIN_PASSWORD_HASH")
    senha = getpass.getpass("Digite a senha administrativa: ")

    print("\nHash gerado. Copie para a variável ADMIN_PASSWORD_HASH:\n")
    print(AdminAuthManager.gerar_hash(senha))

# Como usar:
# python -m app.adapters.outbound.security.admin_auth
