"""Sample Shalom payloads for the mock API, in the wire format the real API uses."""

SAMPLE_AGENCIES = [
    {
        "ter_id": 48,
        "abreviaturaTerminal": "CHH",
        "zona": "CHACHAPOYAS",
        "provincia": "CHACHAPOYAS",
        "departamento": "AMAZONAS",
        "lugar": "CHACHAPOYAS CO DOS DE MAYO",
        "latitud": "-6.238673290149498",
        "longitud": "-77.86800826533634",
        "direccion": "JR. DOS DE MAYO CDRA. 15 S/N CHACHAPOYAS",
        "telefono": "(01) 500 7878",
        "horaAtencion": "LUNES A SABADO - 8AM A 8PM",
        "horaDomingo": "DOMINGOS DE 8:00 AM A 5:00 PM",
        "estadoAgencia": "ATENDIENDO EN ESTE MOMENTO",
        "nombre": "AMAZONAS / CHACHAPOYAS / CHACHAPOYAS / CHACHAPOYAS CO DOS DE MAYO",
    },
    {
        "ter_id": 356,
        "abreviaturaTerminal": "LOL",
        "zona": "LOS OLIVOS",
        "provincia": "LIMA",
        "departamento": "LIMA",
        "lugar": "LOS OLIVOS AV. UNIVERSITARIA",
        "latitud": "-11.991566",
        "longitud": "-77.075844",
        "direccion": "AV. UNIVERSITARIA 6520 LOS OLIVOS",
        "telefono": "(01) 500 7878",
        "horaAtencion": "LUNES A SABADO - 8AM A 9PM",
        "horaDomingo": None,
        "estadoAgencia": "ATENDIENDO EN ESTE MOMENTO",
        "nombre": "LIMA / LIMA / LOS OLIVOS / LOS OLIVOS AV. UNIVERSITARIA",
    },
    {
        "ter_id": 20,
        "abreviaturaTerminal": "ATE",
        "zona": "ATE",
        "provincia": "LIMA",
        "departamento": "LIMA",
        "lugar": "ATE SANTA CLARA",
        "latitud": "-12.0247",
        "longitud": "-76.9187",
        "direccion": "CARRETERA CENTRAL KM 11.5 ATE",
        "telefono": "(01) 500 7878",
        "horaAtencion": "LUNES A SABADO - 8AM A 8PM",
        "horaDomingo": None,
        "estadoAgencia": None,
        "nombre": "LIMA / LIMA / ATE / ATE SANTA CLARA",
    },
    {
        "ter_id": 17,
        "abreviaturaTerminal": "CUS",
        "zona": "WANCHAQ",
        "provincia": "CUSCO",
        "departamento": "CUSCO",
        "lugar": "CUSCO AV. DE LA CULTURA",
        "latitud": "-13.5226",
        "longitud": "-71.9673",
        "direccion": "AV. DE LA CULTURA 1420 WANCHAQ",
        "telefono": "(084) 500 7878",
        "horaAtencion": "LUNES A SABADO - 8AM A 8PM",
        "horaDomingo": "DOMINGOS DE 9:00 AM A 1:00 PM",
        "estadoAgencia": "CERRADO",
        "nombre": "CUSCO / CUSCO / WANCHAQ / CUSCO AV. DE LA CULTURA",
    },
    {
        "ter_id": 91,
        "abreviaturaTerminal": "TAM",
        "zona": "EL TAMBO",
        "provincia": "HUANCAYO",
        "departamento": "JUNÍN",
        "lugar": "EL TAMBO AV. HUANCAVELICA",
        "latitud": "-12.0583",
        "longitud": "-75.2153",
        "direccion": "AV. HUANCAVELICA 1210 EL TAMBO",
        "telefono": "(064) 500 7878",
        "horaAtencion": "LUNES A SABADO - 8AM A 8PM",
        "horaDomingo": None,
        "estadoAgencia": "ATENDIENDO EN ESTE MOMENTO",
        "nombre": "JUNÍN / HUANCAYO / EL TAMBO / EL TAMBO AV. HUANCAVELICA",
    },
]

SAMPLE_WAYBILL = {
    "ose_id": 49229631,
    "numero_orden": "45751322",
    "codigo_orden": "M7P7",
    "fecha_traslado": "2025-05-12",
    "fecha_emision": "2025-05-10",
    "tipo_pago": "CONTADO",
    "estado_pago": "PAGADO",
    "contenido": "CAJA PAQUETE M",
    "monto": "18.00",
    "entregado": False,
    "direccion_entrega": "",
    "tiempo_llegada": "2 DIAS",
    "origen": {
        "id": 356,
        "nombre": "LOS OLIVOS AV. UNIVERSITARIA",
        "abrebiatura": "LOL",
        "ubigeo": 150117,
        "departamento": "LIMA",
        "provincia": "LIMA",
        "distrito": "LOS OLIVOS",
    },
    "destino": {
        "id": 48,
        "nombre": "CHACHAPOYAS CO DOS DE MAYO",
        "abrebiatura": "CHH",
        "ubigeo": 10101,
        "departamento": "AMAZONAS",
        "provincia": "CHACHAPOYAS",
        "distrito": "CHACHAPOYAS",
    },
    "remitente": {"documento": "20512345678", "nombre": "COMERCIAL ANDINA SAC"},
    "destinatario": {"documento": "41234567", "nombre": "ROSA QUISPE HUAMAN"},
    "reparto": False,
    "montoAdicional": 0,
    "aereo": False,
}

SAMPLE_STATUS = {
    "registrado": {"fecha": "2025-05-10 09:14:00"},
    "origen": {"fecha": "2025-05-10 18:40:00"},
    "transito": {
        "fecha": "2025-05-11 06:05:00",
        "completo": True,
        "carguero": "8812",
        "cargueros": ["8812"],
    },
    "destino": {"fecha": "2025-05-12 15:30:00", "completo": False},
    "entregado": None,
    "reparto": None,
    "demora": None,
}

SAMPLE_DOCUMENT = {
    "enlace": "https://servicesweb.shalomcontrol.com/storage/grt/49229631-8812.pdf",
}

SAMPLE_TARIFF = {
    "price": 10.0,
    "tariff": {
        "peso": 0,
        "volumen": 0,
        "sobre": 8.0,
        "cajapaquetexxs": 10.0,
        "cajapaquetexs": 12.0,
        "cajapaquetes": 15.0,
        "cajapaquetem": 18.0,
        "cajapaquetel": 25.0,
        "ovz": 0,
        "hea": 0,
    },
    "lead_time": "2 días",
    "message": "Tarifa encontrada",
    "type": "normal",
}


def success_response(data, message: str = "Operación exitosa") -> dict:
    """Standard Shalom success envelope."""
    return {"success": True, "message": message, "data": data}


def error_response(message: str) -> dict:
    """Standard Shalom failure envelope."""
    return {"success": False, "message": message, "data": None}
