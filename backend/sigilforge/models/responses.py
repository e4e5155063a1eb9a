"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from sigilforge.engine.context import GenerationResult


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    generators_registered: int = 0


class ErrorResponse(BaseModel):
    error: str
    message: str


class PointModel(BaseModel):
    x: float
    y: float


class MetadataModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    processed_text: str = Field(alias="processedText")
    original_length: int = Field(alias="originalLength")
    unique_characters: int = Field(alias="uniqueCharacters")
    generation_time: float = Field(alias="generationTime", description="Milliseconds")


class ComplexityModel(BaseModel):
    paths: int = 0
    points: int = 0
    score: int = 0


class BoundingBoxModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    min_x: float = Field(alias="minX")
    min_y: float = Field(alias="minY")
    max_x: float = Field(alias="maxX")
    max_y: float = Field(alias="maxY")
    width: float
    height: float
    center_x: float = Field(alias="centerX")
    center_y: float = Field(alias="centerY")


class SymmetryModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    horizontal: int = Field(alias="horizontalSymmetry")
    vertical: int = Field(alias="verticalSymmetry")
    radial: int = Field(alias="radialSymmetry")
    average: int = Field(alias="averageSymmetry")


class GenerateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    intention: str
    category: str
    paths: list[list[PointModel]] = Field(default_factory=list)
    metadata: MetadataModel
    complexity: ComplexityModel
    tags: list[str] = Field(default_factory=list)
    bounding_box: BoundingBoxModel = Field(alias="boundingBox")
    symmetry: SymmetryModel
    generation_method: str = Field(default="server", alias="generationMethod")

    @classmethod
    def from_result(cls, result: GenerationResult) -> GenerateResponse:
        meta = result.metadata
        box = result.bounding_box
        sym = result.symmetry
        return cls(
            intention=result.intention,
            category=result.category,
            paths=[[PointModel(x=x, y=y) for x, y in path] for path in result.paths],
            metadata=MetadataModel(
                processed_text=meta.processed_text,
                original_length=meta.original_length,
                unique_characters=meta.unique_characters,
                generation_time=meta.generation_time_ms,
            ),
            complexity=ComplexityModel(
                paths=result.complexity.path_count,
                points=result.complexity.point_count,
                score=result.complexity.score,
            ),
            tags=result.tags,
            bounding_box=BoundingBoxModel(
                min_x=box.min_x,
                min_y=box.min_y,
                max_x=box.max_x,
                max_y=box.max_y,
                width=box.width,
                height=box.height,
                center_x=box.center[0],
                center_y=box.center[1],
            ),
            symmetry=SymmetryModel(
                horizontal=sym.horizontal,
                vertical=sym.vertical,
                radial=sym.radial,
                average=sym.average,
            ),
            generation_method=result.generation_method,
        )
