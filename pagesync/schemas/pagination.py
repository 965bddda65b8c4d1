from pydantic import BaseModel, ConfigDict, Field


class PaginationState(BaseModel):
    """Immutable pagination snapshot owned by a store"""
    model_config = ConfigDict(frozen=True)

    page: int = Field(default=0, ge=0)  # zero-based
    page_size: int = Field(gt=0)
    pages: int = Field(default=0, ge=0)
    total_count: int = Field(default=0, ge=0)

    @property
    def last_page(self) -> int:
        """Index of the last valid page (0 when the collection is empty)"""
        return max(self.pages - 1, 0)


class PageWindow(BaseModel):
    """Page indices to render around the current page"""
    model_config = ConfigDict(frozen=True)

    indices: tuple[int, ...] = ()
    start: int = 0
    end: int = 0
    offset: int = 0  # 1 when first/last jumps are shown
    show_edges: bool = False
    can_go_back: bool = False
    can_go_forward: bool = False


class PageLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int
    label: str
    current: bool = False


class PagerControl(BaseModel):
    """A first/previous/next/last button"""
    model_config = ConfigDict(frozen=True)

    target: int
    hidden: bool = True
    disabled: bool = True


class PagerRender(BaseModel):
    """Everything a pager widget needs to draw itself once"""
    model_config = ConfigDict(frozen=True)

    visible: bool = False
    page: int = 0
    pages: int = 0
    links: tuple[PageLink, ...] = ()
    first: PagerControl = PagerControl(target=0)
    previous: PagerControl = PagerControl(target=0)
    next: PagerControl = PagerControl(target=0)
    last: PagerControl = PagerControl(target=0)


class TraverseIn(BaseModel):
    page: int


class RefreshIn(BaseModel):
    total_count: int


class PaginationOut(BaseModel):
    resource: str
    state: PaginationState
    window: PageWindow
