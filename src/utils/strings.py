"""
Localized user-facing strings for the Materials Admin application.

Messages are grouped into one catalog per language code. Lookups use the
configured language and fall back to English for keys a catalog lacks.

Usage:
    from src.utils.strings import get_string

    get_string("load_error")
    get_string("alloys_count", count=3)
"""

from typing import Dict, Optional

from .config import get_config
from .constants import DEFAULT_LANGUAGE

EN: Dict[str, str] = {
    # Page
    "page_title": "Materials Management",
    "table_title": "Materials List",
    "add_material": "➕ Add Material",
    "refresh": "🔄 Refresh",
    "search_placeholder": "Search...",
    "ready": "Ready",
    "loading": "Loading materials...",
    "loaded": "Showing {shown} of {total} material(s)",
    # Table
    "col_index": "#",
    "col_name": "Material Name",
    "col_alloys": "Alloys",
    "col_status": "Status",
    "col_actions": "Actions",
    "no_materials": "No materials found",
    "alloys_count": "{count} alloys",
    "status_active": "Active",
    "status_inactive": "Inactive",
    "edit": "✏️ Edit",
    "delete": "🗑️ Delete",
    # Dialogs
    "dialog_add_title": "Add New Material",
    "dialog_edit_title": "Edit Material",
    "dialog_delete_title": "Delete Material",
    "name_label": "Material Name",
    "active_label": "Active",
    "cancel": "Cancel",
    "save": "Save",
    "update": "Update",
    "confirm_delete": "Delete",
    "delete_question": "Are you sure you want to delete this material?",
    "delete_cascade": 'Deleting material "{name}" will also delete all of its related alloys.',
    # Notifications
    "error_title": "Error",
    "success_title": "Success",
    "name_required": "Material name cannot be empty",
    "load_error": "Failed to load materials",
    "create_error": "Failed to create material",
    "update_error": "Failed to update material",
    "delete_error": "Failed to delete material",
    "create_success": "Material created successfully",
    "update_success": "Material updated successfully",
    "delete_success": "Material deleted successfully",
}

FA: Dict[str, str] = {
    # Page
    "page_title": "مدیریت متریال‌ها",
    "table_title": "لیست متریال‌ها",
    "add_material": "➕ افزودن متریال جدید",
    "refresh": "🔄 بارگیری مجدد",
    "search_placeholder": "جستجو...",
    "ready": "آماده",
    "loading": "در حال بارگیری متریال‌ها...",
    "loaded": "نمایش {shown} از {total} متریال",
    # Table
    "col_index": "ردیف",
    "col_name": "نام متریال",
    "col_alloys": "تعداد آلیاژ",
    "col_status": "وضعیت",
    "col_actions": "عملیات",
    "no_materials": "هیچ متریالی یافت نشد",
    "alloys_count": "{count} آلیاژ",
    "status_active": "فعال",
    "status_inactive": "غیرفعال",
    "edit": "✏️ ویرایش",
    "delete": "🗑️ حذف",
    # Dialogs
    "dialog_add_title": "افزودن متریال جدید",
    "dialog_edit_title": "ویرایش متریال",
    "dialog_delete_title": "حذف متریال",
    "name_label": "نام متریال",
    "active_label": "فعال",
    "cancel": "انصراف",
    "save": "ذخیره",
    "update": "به‌روزرسانی",
    "confirm_delete": "حذف",
    "delete_question": "آیا از حذف این متریال اطمینان دارید؟",
    "delete_cascade": 'با حذف متریال "{name}"، تمامی آلیاژهای مرتبط با آن نیز حذف خواهند شد.',
    # Notifications
    "error_title": "خطا",
    "success_title": "موفقیت",
    "name_required": "نام متریال نمی‌تواند خالی باشد",
    "load_error": "خطا در بارگیری متریال‌ها",
    "create_error": "خطا در ایجاد متریال",
    "update_error": "خطا در به‌روزرسانی متریال",
    "delete_error": "خطا در حذف متریال",
    "create_success": "متریال با موفقیت ایجاد شد",
    "update_success": "متریال با موفقیت به‌روزرسانی شد",
    "delete_success": "متریال با موفقیت حذف شد",
}

CATALOGS: Dict[str, Dict[str, str]] = {
    "en": EN,
    "fa": FA,
}


def get_string(key: str, language: Optional[str] = None, **kwargs) -> str:
    """
    Look up a localized string and format it.

    Args:
        key: Message identifier
        language: Language code (defaults to the configured language)
        **kwargs: Format arguments substituted into the message

    Returns:
        Formatted message text

    Raises:
        KeyError: If the key is missing from the English catalog as well
    """
    if language is None:
        language = get_config().language

    catalog = CATALOGS.get(language, CATALOGS[DEFAULT_LANGUAGE])
    template = catalog.get(key)
    if template is None:
        template = CATALOGS[DEFAULT_LANGUAGE][key]

    return template.format(**kwargs) if kwargs else template
