from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import SQLModel, Session

from tasksync.core.errors import InternalError

# Type générique pour le modèle (User, Todo, Category, etc.)
ModelT = TypeVar("ModelT", bound=SQLModel)

class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les opérations CRUD standards.

    👉 Ne contient aucune logique métier.
    👉 Gère la persistance générique : get, create, update.
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    👉 Pas de delete : les entités synchronisées ne sont jamais supprimées physiquement.
    👉 Un échec du stockage remonte en InternalError (session annulée).
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    # ---------- READ ----------

    def get(self, id_: Any) -> Optional[ModelT]:
        """Retourne un enregistrement par son identifiant, ou None."""
        return self.session.get(self.model, id_)

    # ---------- CREATE ----------

    def create(self, *, commit: bool = True, **fields) -> ModelT:
        """
        Crée et persiste un nouvel enregistrement.
        commit=False permet d'orchestrer une transaction globale au niveau service.
        """
        entity = self.model(**fields)
        return self._persist(entity, commit=commit)

    # ---------- UPDATE ----------

    def update(self, entity: ModelT, *, commit: bool = True, **changes) -> ModelT:
        """
        Met à jour un enregistrement existant.
        commit=False permet d'orchestrer une transaction globale au niveau service.
        """
        for key, value in changes.items():
            setattr(entity, key, value)
        return self._persist(entity, commit=commit)

    # ---------- HELPERS ----------

    def _persist(self, entity: ModelT, *, commit: bool) -> ModelT:
        self.session.add(entity)
        try:
            if commit:
                self.session.commit()
                self.session.refresh(entity)
            else:
                # flush pour obtenir l'ID sans commit (utile pour FKs)
                self.session.flush()
        except IntegrityError:
            # contraintes d'unicité : traduites par les repositories concrets
            raise
        except SQLAlchemyError as e:
            self.session.rollback()
            raise InternalError() from e
        return entity
