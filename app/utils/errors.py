# app/utils/errors.py


class NewsletterError(Exception):
    """Erro base do fluxo de newsletter.

    `message` é o texto genérico devolvido ao usuário; o texto passado no
    construtor vai para os logs.
    """

    status_code = 500
    message = "Something went wrong. Please try again."
    # quando True, o detalhe vai para a resposta no lugar da mensagem genérica
    expose_detail = False

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.message)
        self.detail = detail or self.message


class NotFound(NewsletterError):
    status_code = 404
    message = "Not found"
    expose_detail = True


class ChildInactive(NewsletterError):
    status_code = 409
    message = "Newsletters are paused for this child"
    expose_detail = True


class UpstreamGenerationError(NewsletterError):
    status_code = 502
    message = "Failed to generate newsletter"


class PersistenceError(NewsletterError):
    status_code = 500
    message = "Failed to save newsletter"


class DeliveryError(NewsletterError):
    status_code = 502
    message = "Failed to send newsletter"


class MissingRecipient(NewsletterError):
    status_code = 422
    message = "Parent email not found"
    expose_detail = True
