from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from flashcard_api.application.learning.services.flashcard_csv_service import (
    FlashcardCsvService,
)
from flashcard_api.application.learning.use_cases.batch.create_flashcards_batch_use_case import (
    CreateFlashcardsBatchUseCase,
)
from flashcard_api.application.learning.use_cases.batch.import_flashcards_csv_use_case import (
    ImportFlashcardsCsvUseCase,
)
from flashcard_api.application.learning.use_cases.export.export_flashcards_use_case import (
    ExportFlashcardsUseCase,
)
from flashcard_api.application.learning.use_cases.flashcards.create_flashcard_use_case import (
    CreateFlashcardUseCase,
)
from flashcard_api.application.learning.use_cases.flashcards.delete_flashcard_use_case import (
    DeleteFlashcardUseCase,
)
from flashcard_api.application.learning.use_cases.flashcards.get_flashcards_use_case import (
    GetFlashcardsUseCase,
)
from flashcard_api.application.learning.use_cases.flashcards.get_random_flashcards_use_case import (
    GetRandomFlashcardsUseCase,
)
from flashcard_api.application.learning.use_cases.flashcards.review_flashcard_use_case import (
    ReviewFlashcardUseCase,
)
from flashcard_api.application.learning.use_cases.flashcards.update_flashcard_use_case import (
    UpdateFlashcardUseCase,
)
from flashcard_api.infrastructure.common.unit_of_work import (
    InMemoryUnitOfWork,
    SqlAlchemyUnitOfWork,
)
from flashcard_api.infrastructure.learning.repositories import (
    FlashcardRepository,
    InMemoryFlashcardRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    config = providers.Configuration()

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Store selection; config.persistence_backend is set once at startup
    in_memory_flashcard_repository = providers.Singleton(InMemoryFlashcardRepository)

    flashcard_repository = providers.Selector(
        config.persistence_backend,
        memory=in_memory_flashcard_repository,
        database=providers.Factory(FlashcardRepository, db=db),
    )
    unit_of_work = providers.Selector(
        config.persistence_backend,
        memory=providers.Factory(InMemoryUnitOfWork),
        database=providers.Factory(SqlAlchemyUnitOfWork, db=db),
    )

    # Application services (no storage)
    flashcard_csv_service = providers.Factory(FlashcardCsvService)

    # Learning module use cases
    get_flashcards_use_case = providers.Factory(
        GetFlashcardsUseCase,
        flashcard_repository=flashcard_repository,
    )
    create_flashcard_use_case = providers.Factory(
        CreateFlashcardUseCase,
        flashcard_repository=flashcard_repository,
        unit_of_work=unit_of_work,
    )
    update_flashcard_use_case = providers.Factory(
        UpdateFlashcardUseCase,
        flashcard_repository=flashcard_repository,
        unit_of_work=unit_of_work,
    )
    delete_flashcard_use_case = providers.Factory(
        DeleteFlashcardUseCase,
        flashcard_repository=flashcard_repository,
        unit_of_work=unit_of_work,
    )
    review_flashcard_use_case = providers.Factory(
        ReviewFlashcardUseCase,
        flashcard_repository=flashcard_repository,
        unit_of_work=unit_of_work,
    )
    get_random_flashcards_use_case = providers.Factory(
        GetRandomFlashcardsUseCase,
        flashcard_repository=flashcard_repository,
    )
    create_flashcards_batch_use_case = providers.Factory(
        CreateFlashcardsBatchUseCase,
        flashcard_repository=flashcard_repository,
        unit_of_work=unit_of_work,
    )
    import_flashcards_csv_use_case = providers.Factory(
        ImportFlashcardsCsvUseCase,
        batch_use_case=create_flashcards_batch_use_case,
        csv_service=flashcard_csv_service,
    )
    export_flashcards_use_case = providers.Factory(
        ExportFlashcardsUseCase,
        flashcard_repository=flashcard_repository,
        csv_service=flashcard_csv_service,
    )


# Initialize container
container = Container()
container.config.persistence_backend.from_value("memory")
