from abc import ABC, abstractmethod


class EmailSenderPort(ABC):
    @abstractmethod
    def send(self, to_email: str, subject: str, html_content: str, text_content: str) -> None:
        raise NotImplementedError
