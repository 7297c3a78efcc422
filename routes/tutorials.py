# =============================================================
# 📚 ROUTE TUTORIALS — CRUD des tutoriels (DD Task)
# =============================================================

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session, select, col
from sqlalchemy import delete, func
from typing import List, Optional
import logging

from database import get_session
from models import Tutorial, TutorialCreate, TutorialRead, TutorialUpdate, utc_now

logger = logging.getLogger("uvicorn")

# -------------------------------------------------------------
# 🧩 INITIALISATION
# -------------------------------------------------------------
router = APIRouter(prefix="/api/tutorials", tags=["Tutorials"])


def title_filter(title: str):
    """Sous-chaîne insensible à la casse ; % et _ sont pris littéralement."""
    return func.lower(col(Tutorial.title)).contains(title.lower(), autoescape=True)


# -------------------------------------------------------------
# ➕ CRÉATION D'UN TUTORIEL
# -------------------------------------------------------------
@router.post("", response_model=TutorialRead, status_code=status.HTTP_201_CREATED)
def create_tutorial(data: Optional[TutorialCreate] = None, session: Session = Depends(get_session)):
    """
    Crée un tutoriel. Le titre est obligatoire.
    """
    if data is None or not data.title:
        raise HTTPException(status_code=400, detail="Content can not be empty!")
    try:
        tutorial = Tutorial(
            title=data.title,
            description=data.description,
            published=data.published,
        )
        session.add(tutorial)
        session.commit()
        session.refresh(tutorial)
        logger.info(f"✅ Tutorial created: {tutorial.id}")
        return tutorial
    except Exception as e:
        session.rollback()
        logger.error(f"❌ Error creating tutorial: {e}")
        raise HTTPException(
            status_code=500,
            detail=str(e) or "Some error occurred while creating the Tutorial.",
        )


# -------------------------------------------------------------
# 📖 LISTE DES TUTORIELS (filtre optionnel sur le titre)
# -------------------------------------------------------------
@router.get("", response_model=List[TutorialRead])
def list_tutorials(title: Optional[str] = None, session: Session = Depends(get_session)):
    """
    Retourne tous les tutoriels, ou ceux dont le titre contient `title`.
    """
    try:
        query = select(Tutorial)
        if title:
            query = query.where(title_filter(title))
        return session.exec(query.order_by(Tutorial.created_at)).all()
    except Exception as e:
        logger.error(f"❌ Error retrieving tutorials: {e}")
        raise HTTPException(
            status_code=500,
            detail=str(e) or "Some error occurred while retrieving tutorials.",
        )


@router.get("/published", response_model=List[TutorialRead])
def list_published(session: Session = Depends(get_session)):
    """Retourne les tutoriels publiés."""
    try:
        query = select(Tutorial).where(Tutorial.published == True)  # noqa: E712
        return session.exec(query.order_by(Tutorial.created_at)).all()
    except Exception as e:
        logger.error(f"❌ Error retrieving published tutorials: {e}")
        raise HTTPException(
            status_code=500,
            detail=str(e) or "Some error occurred while retrieving tutorials.",
        )


# -------------------------------------------------------------
# 🔎 RÉCUPÉRATION PAR ID
# -------------------------------------------------------------
@router.get("/{tutorial_id}", response_model=TutorialRead)
def get_tutorial(tutorial_id: str, session: Session = Depends(get_session)):
    try:
        tutorial = session.get(Tutorial, tutorial_id)
        if not tutorial:
            raise HTTPException(status_code=404, detail=f"Not found Tutorial with id {tutorial_id}")
        return tutorial
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error retrieving tutorial {tutorial_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error retrieving Tutorial with id={tutorial_id}")


# -------------------------------------------------------------
# ✏️ MISE À JOUR PARTIELLE
# -------------------------------------------------------------
@router.put("/{tutorial_id}", response_model=dict)
def update_tutorial(tutorial_id: str, data: TutorialUpdate, session: Session = Depends(get_session)):
    """
    Écrase uniquement les champs présents dans le corps de la requête.
    """
    changes = data.model_dump(exclude_unset=True)
    if not changes:
        raise HTTPException(status_code=400, detail="Data to update can not be empty!")
    try:
        tutorial = session.get(Tutorial, tutorial_id)
        if not tutorial:
            raise HTTPException(
                status_code=404,
                detail=f"Cannot update Tutorial with id={tutorial_id}. Maybe Tutorial was not found!",
            )

        for field, value in changes.items():
            # null garde la valeur par défaut du schéma
            if value is None:
                value = TutorialRead.model_fields[field].default
            setattr(tutorial, field, value)
        tutorial.updated_at = utc_now()

        session.add(tutorial)
        session.commit()
        return {"message": "Tutorial was updated successfully."}

    except HTTPException:
        raise
    except Exception as e:
        session.rollback()
        logger.error(f"❌ Error updating tutorial {tutorial_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error updating Tutorial with id={tutorial_id}")


# -------------------------------------------------------------
# ❌ SUPPRESSION PAR ID
# -------------------------------------------------------------
@router.delete("/{tutorial_id}", response_model=dict)
def delete_tutorial(tutorial_id: str, session: Session = Depends(get_session)):
    try:
        tutorial = session.get(Tutorial, tutorial_id)
        if not tutorial:
            raise HTTPException(
                status_code=404,
                detail=f"Cannot delete Tutorial with id={tutorial_id}. Maybe Tutorial was not found!",
            )

        session.delete(tutorial)
        session.commit()
        return {"message": "Tutorial was deleted successfully!"}

    except HTTPException:
        raise
    except Exception as e:
        session.rollback()
        logger.error(f"❌ Error deleting tutorial {tutorial_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Could not delete Tutorial with id={tutorial_id}")


# -------------------------------------------------------------
# 🗑️ SUPPRESSION DE TOUS LES TUTORIELS
# -------------------------------------------------------------
@router.delete("", response_model=dict)
def delete_all_tutorials(session: Session = Depends(get_session)):
    try:
        result = session.exec(delete(Tutorial))
        session.commit()
        logger.info(f"🗑️ {result.rowcount} tutorials deleted")
        return {"message": f"{result.rowcount} Tutorials were deleted successfully!"}
    except Exception as e:
        session.rollback()
        logger.error(f"❌ Error deleting all tutorials: {e}")
        raise HTTPException(
            status_code=500,
            detail=str(e) or "Some error occurred while removing all tutorials.",
        )
