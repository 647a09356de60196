# hoshizora/messages.py
# User-facing category messages shared by the server and the admin client.

NAME_REQUIRED = 'กรุณากรอกชื่อหมวดหมู่'
SLUG_REQUIRED = 'กรุณากรอก slug'
SLUG_INVALID = 'Slug ต้องประกอบด้วยตัวอักษรภาษาอังกฤษพิมพ์เล็ก ตัวเลข และเครื่องหมาย - เท่านั้น'
SLUG_TAKEN = 'Slug นี้ถูกใช้งานแล้ว'
DESCRIPTION_INVALID = 'คำอธิบายต้องเป็นข้อความ'
