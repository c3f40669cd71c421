from contextlib import contextmanager
from typing import Any, Generic, Iterator, List, Optional, Type, TypeVar

from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Session, select, func

# Type générique pour le modèle (Tutorial, etc.)
ModelT = TypeVar("ModelT", bound=SQLModel)


class StoreError(Exception):
    """
    Échec de la couche de persistance (connexion, contrainte, sérialisation…).

    `message` contient le message du driver quand il existe, sinon None :
    c'est à l'appelant de choisir un message de repli.
    """

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "store error")
        self.message = message

    @classmethod
    def from_exception(cls, exc: SQLAlchemyError) -> "StoreError":
        orig = getattr(exc, "orig", None)
        text = str(orig) if orig is not None else str(exc)
        return cls(text or None)


class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les opérations CRUD standards.

    👉 Ne contient aucune logique métier.
    👉 Gère la persistance générique : create, find_all, get, update, destroy, count.
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    👉 Toute erreur SQLAlchemy est annulée (rollback) puis relevée en StoreError.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def _guard(self) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreError.from_exception(exc) from exc

    # ---------- READ ----------

    def find_all(self, *where: Any) -> List[ModelT]:
        """
        Retourne tous les enregistrements qui satisfont les prédicats (ET logique).
        Sans prédicat : toute la table. Trié par id.
        """
        statement = select(self.model)
        if where:
            statement = statement.where(*where)
        statement = statement.order_by(self.model.id)
        with self._guard():
            return list(self.session.exec(statement).all())

    def count(self) -> int:
        """Retourne le nombre total d'enregistrements."""
        with self._guard():
            return self.session.exec(select(func.count(self.model.id))).one()

    def get(self, id_: Any) -> Optional[ModelT]:
        """Retourne un enregistrement par son identifiant, ou None."""
        with self._guard():
            return self.session.get(self.model, id_)

    # ---------- CREATE ----------

    def create(self, **fields) -> ModelT:
        """Crée et persiste un nouvel enregistrement (id et timestamps assignés par la DB)."""
        entity = self.model(**fields)
        with self._guard():
            self.session.add(entity)
            self.session.commit()
            self.session.refresh(entity)
        return entity

    # ---------- UPDATE ----------

    def update_by_id(self, id_: Any, **changes) -> int:
        """
        Remplace uniquement les champs fournis sur l'enregistrement `id_`.
        Retourne le nombre de lignes touchées (0 ou 1) ; un id inexistant n'est pas une erreur.
        updated_at est rafraîchi par la colonne elle-même (onupdate).
        """
        if not changes:
            return 0
        statement = update(self.model).where(self.model.id == id_).values(**changes)
        with self._guard():
            result = self.session.exec(statement)  # type: ignore[call-overload]
            self.session.commit()
        return result.rowcount

    # ---------- DELETE ----------

    def destroy_by_id(self, id_: Any) -> int:
        """Supprime l'enregistrement `id_`. Retourne le nombre de lignes supprimées (0 ou 1)."""
        statement = delete(self.model).where(self.model.id == id_)
        with self._guard():
            result = self.session.exec(statement)  # type: ignore[call-overload]
            self.session.commit()
        return result.rowcount

    def destroy_all(self) -> int:
        """Vide la table. Retourne le nombre de lignes supprimées."""
        with self._guard():
            result = self.session.exec(delete(self.model))  # type: ignore[call-overload]
            self.session.commit()
        return result.rowcount
