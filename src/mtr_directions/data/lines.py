"""Static metadata for MTR heavy rail lines."""

from ..core.models import MtrLineInfo

MTR_LINES: dict[str, MtrLineInfo] = {
    line.code: line
    for line in (
        MtrLineInfo(
            code="AEL", name_en="Airport Express", name_zh="機場快綫", color="#00888A"
        ),
        MtrLineInfo(
            code="DRL",
            name_en="Disneyland Resort Line",
            name_zh="迪士尼綫",
            color="#F173AC",
        ),
        MtrLineInfo(
            code="EAL", name_en="East Rail Line", name_zh="東鐵綫", color="#53B7E8"
        ),
        MtrLineInfo(code="ISL", name_en="Island Line", name_zh="港島綫", color="#007DC5"),
        MtrLineInfo(
            code="KTL", name_en="Kwun Tong Line", name_zh="觀塘綫", color="#00AB4E"
        ),
        MtrLineInfo(code="TML", name_en="Tuen Ma Line", name_zh="屯馬綫", color="#923011"),
        MtrLineInfo(
            code="TCL", name_en="Tung Chung Line", name_zh="東涌綫", color="#F7943E"
        ),
        MtrLineInfo(
            code="TKL", name_en="Tseung Kwan O Line", name_zh="將軍澳綫", color="#7D499D"
        ),
        MtrLineInfo(
            code="TWL", name_en="Tsuen Wan Line", name_zh="荃灣綫", color="#ED1D24"
        ),
        MtrLineInfo(
            code="SIL", name_en="South Island Line", name_zh="南港島綫", color="#BAC429"
        ),
    )
}


def get_mtr_line(code: str) -> MtrLineInfo | None:
    """Get line metadata by line code."""
    return MTR_LINES.get(code)
