"""
Base pipeline class that the encode and decode pipelines inherit from.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from pathlib import Path


class BasePipeline(ABC):
    """Abstract base class for image processing pipelines."""
    
    def __init__(self, input_path: Path, output_path: Optional[Path] = None) -> None:
        """
        Initialize the pipeline.
        
        Args:
            input_path: Path to the source image
            output_path: Optional path of the file the pipeline produces
        """
        self.input_path = Path(input_path)
        self.output_path = Path(output_path) if output_path is not None else None
        
    @abstractmethod
    def run(self) -> Dict[str, Any]:
        """
        Run the pipeline's main logic.
        
        Returns:
            Dict containing results and metadata
        """
        pass
    
    @abstractmethod
    def validate_input(self) -> bool:
        """
        Validate input data before processing.
        
        Returns:
            bool indicating if input is valid
        """
        pass
